"""PathNormalizer: rewrites dotted paths into unambiguous JSONPath.

Two ambiguities are resolved:
- The literal root marker (``(root)`` by default) becomes the JSONPath root ``$``.
- A numeric segment is either an array index or a literal key. The active
  IndexPolicy decides. Indices are folded into the previous segment in bracket
  notation (``items.0`` -> ``items[0]``); keys stay as their own segment.

The default policy, StatusCodeIndexPolicy, reads numbers below 200 as indices
and everything else as keys, because the numeric keys met in OpenAPI documents
are HTTP status codes while real array indices are small.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from yaml_node_query.protocols import IndexPolicy

__all__ = ["ROOT_MARKER", "PathNormalizer", "StatusCodeIndexPolicy"]

ROOT_MARKER = "(root)"

# Same grammar as an integer literal: optional sign, ASCII digits only.
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class StatusCodeIndexPolicy:
    """Reads numeric segments below ``threshold`` as array indices.

    Attributes:
        threshold: Smallest value treated as a literal key. Defaults to 200,
            the lowest status code expected as a response key.
    """

    threshold: int = 200

    def __post_init__(self) -> None:
        if self.threshold < 0:
            msg = f"threshold must be >= 0, got {self.threshold}"
            raise ValueError(msg)

    def is_index(self, value: int) -> bool:
        return value < self.threshold


class PathNormalizer:
    """Normalizes dot-separated path expressions.

    Example usage:
        normalizer = PathNormalizer()
        normalizer.normalize("(root).tags.0.name")        # "$.tags[0].name"
        normalizer.normalize("(root).responses.404")       # "$.responses.404"
        normalizer.normalize("(root).a.0.1")               # "$.a[0][1]"
    """

    def __init__(
        self, policy: IndexPolicy | None = None, root_marker: str = ROOT_MARKER
    ) -> None:
        self._policy: IndexPolicy = policy if policy is not None else StatusCodeIndexPolicy()
        self._root_marker = root_marker

    def normalize(self, path: str) -> str:
        """Normalize a path expression.

        Processing, segment by segment (segments are split on ``.``):
        1. An integer segment the policy classifies as an index is appended as
           ``[N]`` to the last emitted segment. If that segment is empty, or
           there is none yet, the index is dropped.
        2. An integer segment the policy classifies as a key is kept unchanged.
        3. Any other segment has every occurrence of the root marker replaced
           by ``$``.

        Args:
            path: The raw path expression.

        Returns:
            The rewritten segments joined with ``.``.
        """
        cleaned: list[str] = []
        for token in path.split("."):
            if _INTEGER.fullmatch(token):
                if not self._policy.is_index(int(token)):
                    cleaned.append(token)
                elif cleaned and cleaned[-1]:
                    cleaned[-1] += f"[{token}]"
                continue
            cleaned.append(token.replace(self._root_marker, "$"))
        return ".".join(cleaned)
