"""Typed views of loosely-typed decoded values.

Values produced by ``yaml.safe_load`` (or ``json.loads``) are ``Any``. These
helpers extract the shapes API tooling usually expects: string maps, string
lists, lists stored under a key.

Every helper returns None when the input has the wrong shape, and an empty
container when the shape is right but there is nothing in it. Callers that do
not care about the difference can write ``to_string_map(raw) or {}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["extract_list", "flatten_string_lists", "stringify", "to_string_list", "to_string_map"]


def stringify(value: Any) -> str:
    """Render a decoded scalar the way it is spelled in YAML/JSON.

    Booleans become ``true``/``false`` and None becomes ``null``; everything
    else goes through ``str``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def to_string_map(raw: Any) -> dict[str, str] | None:
    """Return the string-valued entries of a mapping.

    Entries whose key or value is not a string are dropped.

    Returns:
        A new dict, or None if ``raw`` is not a mapping.
    """
    if not isinstance(raw, Mapping):
        return None
    return {k: v for k, v in raw.items() if isinstance(k, str) and isinstance(v, str)}


def to_string_list(raw: Any) -> list[str] | None:
    """Return the items of a list or tuple, stringified.

    Returns:
        A new list, or None if ``raw`` is not a list or tuple.
    """
    if not isinstance(raw, (list, tuple)):
        return None
    return [stringify(item) for item in raw]


def flatten_string_lists(raw: Any) -> list[str] | None:
    """Concatenate the list values of a mapping into one list of strings.

    Items keep mapping order, then list order. Entries whose value is not a
    list or tuple are skipped.

    Returns:
        A new list, or None if ``raw`` is not a mapping.
    """
    if not isinstance(raw, Mapping):
        return None
    flattened: list[str] = []
    for items in raw.values():
        if isinstance(items, (list, tuple)):
            flattened.extend(stringify(item) for item in items)
    return flattened


def extract_list(name: str, raw: Any) -> list[Any] | None:
    """Return the list stored under ``name`` in a mapping.

    Returns:
        The stored list itself (not a copy), or None if ``raw`` is not a
        mapping, ``name`` is absent, or its value is not a list.
    """
    if not isinstance(raw, Mapping):
        return None
    value = raw.get(name)
    if not isinstance(value, list):
        return None
    return value
