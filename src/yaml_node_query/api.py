"""Public API functions for yaml-node-query.

``find_nodes`` is the query facade: it normalizes a path, compiles it with
jsonpath-ng, parses the document bytes with PyYAML and returns the TreeNodes
the path selects. jsonpath-ng evaluates against a plain-Python view of the
tree; each match's full path is then replayed on the tree to hand back the
node itself, with its tag, source text and position.

Nothing is cached between calls: every call compiles its path and parses its
document afresh.
"""

from __future__ import annotations

import logging
from typing import Any

import yaml
from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.jsonpath import Child, Fields, Index, JSONPath, Root, This

from yaml_node_query.config import QueryConfig
from yaml_node_query.constants import DOCUMENT_TYPE_KEYS
from yaml_node_query.errors import DocumentParseError, PathEvaluationError
from yaml_node_query.path.compiler import compile_path
from yaml_node_query.path.normalizer import PathNormalizer
from yaml_node_query.tree.builder import TreeBuilder, to_plain
from yaml_node_query.tree.nodes import NodeKind, TreeNode

__all__ = ["detect_document_type", "find_nodes", "normalize_path", "parse_document"]

logger = logging.getLogger(__name__)

_builder = TreeBuilder()

Segment = str | int


def normalize_path(path: str, config: QueryConfig | None = None) -> str:
    """Rewrite a dotted path into unambiguous JSONPath.

    Args:
        path:   Raw path, e.g. ``"(root).paths./pets.get.responses.200"``.
        config: Supplies the index policy and root marker. Defaults to
                ``QueryConfig()`` when None.

    Returns:
        The normalized path, e.g. ``"$.paths./pets.get.responses.200"``.
    """
    cfg = config or QueryConfig()
    return PathNormalizer(cfg.index_policy, cfg.root_marker).normalize(path)


def parse_document(data: bytes | str) -> TreeNode | None:
    """Parse the first YAML/JSON document in ``data`` into a TreeNode tree.

    Args:
        data: Document text; bytes are decoded by PyYAML (UTF-8/16 detection).

    Returns:
        The document's root node, or None when the stream holds no document.

    Raises:
        DocumentParseError: If the text is not well-formed or contains a
            recursive alias.
    """
    try:
        root = next(yaml.compose_all(data, Loader=yaml.SafeLoader), None)
    except yaml.YAMLError as exc:
        msg = f"cannot parse document: {exc}"
        raise DocumentParseError(msg) from exc
    if root is None:
        return None
    return _builder.build(root)


def find_nodes(
    data: bytes | str,
    path: str,
    config: QueryConfig | None = None,
) -> list[TreeNode]:
    """Return every node of the document ``data`` selected by ``path``.

    Args:
        data:   YAML or JSON document text.
        path:   Path expression; normalized with ``normalize_path`` first.
        config: Query settings. Defaults to ``QueryConfig()`` when None.

    Returns:
        The matching nodes in evaluator order. Empty when nothing matches or
        the document is empty.

    Raises:
        PathSyntaxError: If the normalized path does not compile.
        PathEvaluationError: If evaluation fails, e.g. an index applied to a
            mapping.
        DocumentParseError: If the document is malformed and
            ``config.strict_parse`` is True.
    """
    cfg = config or QueryConfig()
    normalized = normalize_path(path, cfg)
    logger.debug("normalized path %r -> %r", path, normalized)
    expr = compile_path(normalized)

    try:
        root = parse_document(data)
    except DocumentParseError:
        if cfg.strict_parse:
            raise
        logger.debug("document failed to parse, treating as empty", exc_info=True)
        return []
    if root is None:
        return []

    try:
        matches = expr.find(to_plain(root))
    except (JSONPathError, KeyError, IndexError, TypeError, AttributeError) as exc:
        msg = f"cannot evaluate {normalized!r}: {exc}"
        raise PathEvaluationError(msg) from exc

    nodes: list[TreeNode] = []
    for match in matches:
        # Extension results such as `sub` or `len` are fresh values without
        # a parent; only the root itself is contextless and still addressable.
        if match.context is None and not isinstance(match.path, Root):
            logger.debug("skipping computed match: %s", match.path)
            continue
        segments = _segments(match.full_path)
        node = _resolve(root, segments) if segments is not None else None
        if node is None:
            logger.debug("skipping match with no tree node: %s", match.full_path)
            continue
        nodes.append(node)
    return nodes


def detect_document_type(root: TreeNode | None) -> str | None:
    """Return the API description marker key at the top of a document.

    Args:
        root: Root node as returned by ``parse_document``.

    Returns:
        ``"openapi"``, ``"swagger"`` or ``"asyncapi"``, whichever top-level key
        comes first in the document; None for anything else.
    """
    if root is None or root.kind != NodeKind.MAP:
        return None
    for key in root.children[::2]:
        if key.is_scalar and key.label in DOCUMENT_TYPE_KEYS:
            return key.label
    return None


def _index_value(path: Index) -> int:
    indices: Any = getattr(path, "indices", None)
    return indices[0] if indices else path.index


def _segments(path: JSONPath) -> list[Segment] | None:
    """Flatten a match's full path into field names and indices.

    Returns None for path nodes that do not address a location in the tree,
    such as the computed values of jsonpath-ng extensions.
    """
    match path:
        case Root() | This():
            return []
        case Fields(fields=(name,)):
            return [name]
        case Index():
            return [_index_value(path)]
        case Child(left=left, right=right):
            head = _segments(left)
            tail = _segments(right)
            if head is None or tail is None:
                return None
            return head + tail
    return None


def _resolve(root: TreeNode, segments: list[Segment]) -> TreeNode | None:
    node: TreeNode | None = root
    for segment in segments:
        if node is None:
            return None
        if node.kind == NodeKind.MAP:
            node = _map_child(node, segment)
        elif node.kind == NodeKind.SEQUENCE and isinstance(segment, int):
            node = _item(node.children, segment)
        else:
            return None
    return node


def _map_child(node: TreeNode, segment: Segment) -> TreeNode | None:
    values = node.children[1::2]
    if isinstance(segment, int):
        # jsonpath-ng filters address mapping values by position.
        return _item(values, segment)
    found = None
    for key, value in zip(node.children[::2], values, strict=False):
        if key.label == segment:
            found = value
    return found


def _item(items: list[TreeNode], index: int) -> TreeNode | None:
    if -len(items) <= index < len(items):
        return items[index]
    return None
