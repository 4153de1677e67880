"""QueryConfig: immutable settings shared by the normalizer and the query facade."""

from __future__ import annotations

from dataclasses import dataclass, field

from yaml_node_query.path.normalizer import ROOT_MARKER, StatusCodeIndexPolicy
from yaml_node_query.protocols import IndexPolicy

__all__ = ["QueryConfig"]


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Immutable configuration for path normalization and document queries.

    Attributes:
        index_policy: Decides whether a numeric path segment is an array index
            or a literal key.  Defaults to ``StatusCodeIndexPolicy()`` (values
            below 200 are indices).
        root_marker: Literal text rewritten to the JSONPath root ``$``.
            Default ``"(root)"``.
        strict_parse: When True, malformed documents raise
            ``DocumentParseError``.  When False, they are treated as empty and
            queries against them return no nodes.  Default True.
    """

    index_policy: IndexPolicy = field(default_factory=StatusCodeIndexPolicy)
    root_marker: str = ROOT_MARKER
    strict_parse: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.index_policy, IndexPolicy):
            msg = f"index_policy must implement is_index(value), got {self.index_policy!r}"
            raise TypeError(msg)
        if not self.root_marker:
            msg = "root_marker must be a non-empty string"
            raise ValueError(msg)
        if "." in self.root_marker:
            msg = f"root_marker must not contain '.', got {self.root_marker!r}"
            raise ValueError(msg)
