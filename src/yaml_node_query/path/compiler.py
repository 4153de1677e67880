"""Compile normalized paths with jsonpath-ng.

Keys in API descriptions are rarely JSONPath identifiers: ``/pets/{id}``,
``application/json``, ``x-rate-limit`` or a bare ``404`` all trip the
jsonpath-ng lexer. Before compiling, every bare segment is single-quoted,
which jsonpath-ng reads as a field name. Segments that already use JSONPath
syntax (``$``, ``*``, brackets, filters, quotes) are left alone; a trailing
run of brackets is kept and only the name in front of it is quoted, so
``/pets[0]`` becomes ``'/pets'[0]``. A name holding an apostrophe, such as
``it's``, is double-quoted instead.
"""

from __future__ import annotations

import re

from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse
from jsonpath_ng.jsonpath import JSONPath

from yaml_node_query.errors import PathSyntaxError

__all__ = ["compile_path", "quote_segments"]

_SYNTAX_CHARS = frozenset("$@*[]()'\"`?|&=<>!~\\")

# A field name followed by zero or more complete bracket groups.
_HEAD_AND_BRACKETS = re.compile(r"(?P<head>[^\[\]]*)(?P<brackets>(?:\[[^\[\]]*\])*)")


def _quote_segment(segment: str) -> str:
    match = _HEAD_AND_BRACKETS.fullmatch(segment)
    if match is None:
        return segment
    head = match.group("head")
    if not head:
        return segment
    if "'" in head and not _is_quoted(head) and not _SYNTAX_CHARS & set(head.replace("'", "")):
        return f'"{head}"' + match.group("brackets")
    if any(ch in _SYNTAX_CHARS for ch in head):
        return segment
    return f"'{head}'" + match.group("brackets")


def _is_quoted(text: str) -> bool:
    return len(text) > 1 and text[0] == text[-1] == "'"


def quote_segments(path: str) -> str:
    """Quote every bare field name in a normalized, dot-separated path."""
    return ".".join(_quote_segment(segment) for segment in path.split("."))


def compile_path(path: str) -> JSONPath:
    """Compile a normalized path into a jsonpath-ng expression.

    Args:
        path: Output of PathNormalizer.normalize.

    Returns:
        The compiled expression, ready for ``.find(data)``.

    Raises:
        PathSyntaxError: If jsonpath-ng rejects the expression.
    """
    if not path.strip():
        msg = "empty path expression"
        raise PathSyntaxError(msg)
    try:
        return parse(quote_segments(path))
    except JSONPathError as exc:
        msg = f"invalid path expression {path!r}: {exc}"
        raise PathSyntaxError(msg) from exc
