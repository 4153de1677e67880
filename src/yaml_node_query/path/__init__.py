"""Path subpackage: normalization and compilation of path expressions.

Import from this module (not from sub-modules directly) to stay on the stable
public interface.

Example::

    from yaml_node_query.path import PathNormalizer, compile_path

    expr = compile_path(PathNormalizer().normalize("(root).tags.0.name"))
    [match.value for match in expr.find({"tags": [{"name": "pets"}]})]
    # ["pets"]
"""

from __future__ import annotations

from yaml_node_query.path.compiler import compile_path, quote_segments
from yaml_node_query.path.normalizer import (
    ROOT_MARKER,
    PathNormalizer,
    StatusCodeIndexPolicy,
)

__all__ = [
    "ROOT_MARKER",
    "PathNormalizer",
    "StatusCodeIndexPolicy",
    "compile_path",
    "quote_segments",
]
