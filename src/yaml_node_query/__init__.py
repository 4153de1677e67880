"""yaml-node-query - JSONPath-style lookup and classification of YAML/JSON document nodes."""

from __future__ import annotations

from yaml_node_query.api import (
    detect_document_type,
    find_nodes,
    normalize_path,
    parse_document,
)
from yaml_node_query.config import QueryConfig
from yaml_node_query.errors import (
    DocumentParseError,
    PathEvaluationError,
    PathSyntaxError,
    TranscodeError,
    YamlNodeQueryError,
)
from yaml_node_query.formats import is_json, is_yaml, yaml_to_json
from yaml_node_query.path import PathNormalizer, StatusCodeIndexPolicy
from yaml_node_query.protocols import IndexPolicy
from yaml_node_query.tree import (
    KeyValuePair,
    NodeKind,
    TreeNode,
    find_key,
    find_key_recursive,
    is_boolean,
    is_float,
    is_integer,
    is_map,
    is_sequence,
    is_string,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "DocumentParseError",
    "IndexPolicy",
    "KeyValuePair",
    "NodeKind",
    "PathEvaluationError",
    "PathNormalizer",
    "PathSyntaxError",
    "QueryConfig",
    "StatusCodeIndexPolicy",
    "TranscodeError",
    "TreeNode",
    "YamlNodeQueryError",
    "detect_document_type",
    "find_key",
    "find_key_recursive",
    "find_nodes",
    "is_boolean",
    "is_float",
    "is_integer",
    "is_json",
    "is_map",
    "is_sequence",
    "is_string",
    "is_yaml",
    "normalize_path",
    "parse_document",
    "yaml_to_json",
]
