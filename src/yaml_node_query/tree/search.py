"""Direct key lookup over TreeNode child sequences.

Both searches rely on the map-entry invariant: inside the sequence being
scanned, a matching key node is immediately followed by its value node. That
holds for the ``children`` of a MAP node built by TreeBuilder, not for an
arbitrary slice of them. A matching scalar with no successor cannot be a map
entry and is skipped.

- ``find_key`` scans the given nodes and, for each of them, its direct
  children. It never goes deeper.
- ``find_key_recursive`` walks depth-first in document order and returns the
  first match it meets, which is the earliest in traversal order rather than
  the shallowest.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from yaml_node_query.tree.nodes import TreeNode

__all__ = ["KeyValuePair", "find_key", "find_key_recursive"]


@dataclass(frozen=True, slots=True)
class KeyValuePair:
    """Result of a key search: references into the searched tree, never copies.

    Attributes:
        key:   The matching key node, or None when nothing matched.
        value: The node that follows ``key``, or None when nothing matched.
               A key mapped to ``null`` yields a NULL-kind node here, not None.
    """

    key: TreeNode | None = None
    value: TreeNode | None = None

    @property
    def found(self) -> bool:
        """True when the search matched a key."""
        return self.key is not None

    def __iter__(self) -> Iterator[TreeNode | None]:
        yield self.key
        yield self.value


_NOT_FOUND = KeyValuePair()


def _entry_at(key: str, nodes: Sequence[TreeNode], index: int) -> KeyValuePair | None:
    node = nodes[index]
    if node.is_scalar and node.label == key and index + 1 < len(nodes):
        return KeyValuePair(key=node, value=nodes[index + 1])
    return None


def find_key(key: str, nodes: Sequence[TreeNode]) -> KeyValuePair:
    """Find ``key`` among ``nodes`` or among the direct children of each of them.

    A match one level down yields the nested key node and its successor, so
    ``pair.key`` is always the node whose label equals ``key``, never the
    parent collection that holds it.

    Args:
        key:   Scalar text to look for.
        nodes: A child sequence honouring the map-entry invariant, typically
               ``node.children`` of a MAP node.

    Returns:
        The first matching (key, value) pair, or an empty KeyValuePair.
    """
    for i, node in enumerate(nodes):
        pair = _entry_at(key, nodes, i)
        if pair is not None:
            return pair
        for j in range(len(node.children)):
            pair = _entry_at(key, node.children, j)
            if pair is not None:
                return pair
    return _NOT_FOUND


def find_key_recursive(key: str, nodes: Sequence[TreeNode]) -> KeyValuePair:
    """Find the first occurrence of ``key`` in a depth-first walk of ``nodes``.

    Each node is checked before its children, and its children are searched
    before its next sibling. An empty ``key`` never matches.

    Args:
        key:   Scalar text to look for.
        nodes: A child sequence honouring the map-entry invariant.

    Returns:
        The first matching (key, value) pair, or an empty KeyValuePair.
    """
    if not key:
        return _NOT_FOUND
    for i, node in enumerate(nodes):
        pair = _entry_at(key, nodes, i)
        if pair is not None:
            return pair
        if node.children:
            pair = find_key_recursive(key, node.children)
            if pair.found:
                return pair
    return _NOT_FOUND
