"""Node kind predicates.

Each predicate tests membership in exactly one kind, so no node satisfies two
of them. NULL and OTHER nodes satisfy none: there is deliberately no
catch-all predicate.
"""

from __future__ import annotations

from yaml_node_query.tree.nodes import NodeKind, TreeNode

__all__ = ["is_boolean", "is_float", "is_integer", "is_map", "is_sequence", "is_string"]


def is_map(node: TreeNode) -> bool:
    """Return True if the node is a mapping."""
    return node.kind == NodeKind.MAP


def is_sequence(node: TreeNode) -> bool:
    """Return True if the node is a sequence."""
    return node.kind == NodeKind.SEQUENCE


def is_string(node: TreeNode) -> bool:
    """Return True if the node is a string scalar."""
    return node.kind == NodeKind.STRING


def is_integer(node: TreeNode) -> bool:
    """Return True if the node is an integer scalar."""
    return node.kind == NodeKind.INTEGER


def is_float(node: TreeNode) -> bool:
    """Return True if the node is a float scalar."""
    return node.kind == NodeKind.FLOAT


def is_boolean(node: TreeNode) -> bool:
    """Return True if the node is a boolean scalar."""
    return node.kind == NodeKind.BOOLEAN
