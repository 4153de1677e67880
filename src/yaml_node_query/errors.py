"""Exception hierarchy for yaml-node-query.

Errors from PyYAML and jsonpath-ng are re-raised as one of these, chained to
the original exception. Lookup misses are not errors: the search functions
return an empty KeyValuePair and the query facade an empty list.
"""

from __future__ import annotations

__all__ = [
    "DocumentParseError",
    "PathEvaluationError",
    "PathSyntaxError",
    "TranscodeError",
    "YamlNodeQueryError",
]


class YamlNodeQueryError(Exception):
    """Base class for every error raised by this package."""


class PathSyntaxError(YamlNodeQueryError, ValueError):
    """A path expression could not be compiled."""


class PathEvaluationError(YamlNodeQueryError):
    """A compiled path failed while being evaluated against a document."""


class DocumentParseError(YamlNodeQueryError, ValueError):
    """Document bytes are not well-formed YAML/JSON, or contain a recursive alias."""


class TranscodeError(YamlNodeQueryError, ValueError):
    """A YAML document could not be converted to JSON."""
