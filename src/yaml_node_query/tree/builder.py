"""TreeBuilder: converts a PyYAML node graph into a TreeNode tree.

PyYAML's composer (``yaml.compose_all``) resolves tags and source marks but
keeps mapping entries as ``(key, value)`` tuples and shares aliased nodes.
TreeBuilder flattens mapping entries into alternating key/value children and
expands every alias into an independent copy, so the result is a plain
ownership tree.

Scalar nodes keep both their source text (``label``) and a typed Python value
(``value``) built with PyYAML's ``SafeConstructor``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml
from yaml.constructor import ConstructorError, SafeConstructor

from yaml_node_query.errors import DocumentParseError
from yaml_node_query.tree.nodes import NodeKind, TreeNode

_YAML_TAG_PREFIX = "tag:yaml.org,2002:"

_SCALAR_KINDS: dict[str, NodeKind] = {
    "!!str": NodeKind.STRING,
    "!!int": NodeKind.INTEGER,
    "!!float": NodeKind.FLOAT,
    "!!bool": NodeKind.BOOLEAN,
    "!!null": NodeKind.NULL,
}


def short_tag(tag: str) -> str:
    """Return ``tag`` with the standard ``tag:yaml.org,2002:`` prefix shortened to ``!!``."""
    if tag.startswith(_YAML_TAG_PREFIX):
        return "!!" + tag[len(_YAML_TAG_PREFIX) :]
    return tag


@dataclass
class TreeBuilder:
    """Converts a composed PyYAML node into a typed TreeNode tree.

    Kind resolution:
        MappingNode and SequenceNode always become MAP and SEQUENCE, whatever
        their tag. Scalars take their kind from the resolved tag; tags other
        than ``!!str``, ``!!int``, ``!!float``, ``!!bool`` and ``!!null``
        produce OTHER.

    Example::

        root = yaml.compose("a: [1, two]", Loader=yaml.SafeLoader)
        tree = TreeBuilder().build(root)
        # tree: MAP -> [STRING("a"), SEQUENCE -> [INTEGER("1"), STRING("two")]]
    """

    def build(self, node: yaml.Node) -> TreeNode:
        """Convert a composed PyYAML node into a TreeNode tree.

        Args:
            node: Root of a graph produced by ``yaml.compose``/``yaml.compose_all``.

        Returns:
            The equivalent TreeNode tree. Aliased nodes are copied, never shared.

        Raises:
            DocumentParseError: If the graph contains a recursive alias.
        """
        return self._convert(node, SafeConstructor(), set())

    def _convert(
        self, node: yaml.Node, constructor: SafeConstructor, active: set[int]
    ) -> TreeNode:
        if id(node) in active:
            msg = f"recursive alias at line {node.start_mark.line + 1}"
            raise DocumentParseError(msg)

        tag = short_tag(node.tag)
        line, column = _position(node)

        if isinstance(node, yaml.ScalarNode):
            return TreeNode(
                kind=_SCALAR_KINDS.get(tag, NodeKind.OTHER),
                tag=tag,
                label=node.value,
                value=_scalar_value(node, constructor),
                line=line,
                column=column,
            )

        active.add(id(node))
        try:
            if isinstance(node, yaml.MappingNode):
                result = TreeNode(kind=NodeKind.MAP, tag=tag, line=line, column=column)
                for key, val in node.value:
                    result.children.append(self._convert(key, constructor, active))
                    result.children.append(self._convert(val, constructor, active))
                return result

            result = TreeNode(kind=NodeKind.SEQUENCE, tag=tag, line=line, column=column)
            for item in node.value:
                result.children.append(self._convert(item, constructor, active))
            return result
        finally:
            active.discard(id(node))


def to_plain(node: TreeNode) -> Any:
    """Return the plain Python data (dict/list/scalar) a TreeNode tree represents.

    Mapping keys are the keys' source text, so ``200:`` and ``'200':`` both
    become the string key ``"200"``. When a key repeats, the last entry wins.
    """
    if node.kind == NodeKind.MAP:
        pairs = zip(node.children[::2], node.children[1::2], strict=False)
        return {key.label: to_plain(val) for key, val in pairs}
    if node.kind == NodeKind.SEQUENCE:
        return [to_plain(child) for child in node.children]
    return node.value


def _scalar_value(node: yaml.ScalarNode, constructor: SafeConstructor) -> Any:
    # Unknown tags and malformed explicit scalars ("!!int abc") keep their text.
    try:
        return constructor.construct_object(node, deep=True)
    except (ConstructorError, ValueError):
        return node.value


def _position(node: yaml.Node) -> tuple[int, int]:
    mark = node.start_mark
    if mark is None:
        return 0, 0
    return mark.line + 1, mark.column + 1
