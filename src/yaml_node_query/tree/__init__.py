"""Tree subpackage: document node model, construction, classification and search.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing a node in a parsed document
- NodeKind: StrEnum of the eight node kinds
- TreeBuilder: converts a PyYAML node graph into a TreeNode tree
- to_plain: converts a TreeNode tree back into plain Python data
- is_map / is_sequence / is_string / is_integer / is_float / is_boolean
- KeyValuePair, find_key, find_key_recursive: direct key lookup
"""

from yaml_node_query.tree.builder import TreeBuilder, to_plain
from yaml_node_query.tree.classify import (
    is_boolean,
    is_float,
    is_integer,
    is_map,
    is_sequence,
    is_string,
)
from yaml_node_query.tree.nodes import NodeKind, TreeNode
from yaml_node_query.tree.search import KeyValuePair, find_key, find_key_recursive

__all__ = [
    "KeyValuePair",
    "NodeKind",
    "TreeBuilder",
    "TreeNode",
    "find_key",
    "find_key_recursive",
    "is_boolean",
    "is_float",
    "is_integer",
    "is_map",
    "is_sequence",
    "is_string",
    "to_plain",
]
