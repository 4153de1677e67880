"""Format sniffing and YAML to JSON transcoding.

``is_json`` is a syntactic check on the outermost braces only: it does not
parse, and it does not recognise top-level arrays or scalars. ``is_yaml``
parses the text and dumps the result back, so text that loads but cannot be
re-emitted is rejected too. JSON objects are excluded from ``is_yaml`` even
though JSON is valid YAML.
"""

from __future__ import annotations

import datetime
import json
from collections.abc import Mapping
from typing import Any

import yaml

from yaml_node_query.errors import TranscodeError

__all__ = ["is_json", "is_yaml", "yaml_to_json"]


def is_json(text: str) -> bool:
    """Return True if ``text``, trimmed, starts with ``{`` and ends with ``}``."""
    stripped = text.strip()
    if not stripped:
        return False
    return stripped[0] == "{" and stripped[-1] == "}"


def is_yaml(text: str) -> bool:
    """Return True if ``text`` is a non-JSON document that loads and dumps as YAML."""
    if not text or is_json(text):
        return False
    try:
        data = yaml.safe_load(text)
        yaml.safe_dump(data)
    except yaml.YAMLError:
        return False
    return True


def yaml_to_json(data: bytes | str) -> bytes:
    """Convert a YAML document whose top level is a mapping into JSON bytes.

    Output uses sorted keys and compact separators. Non-string keys are
    stringified and dates/timestamps are written in ISO 8601.

    Args:
        data: YAML text, as bytes (encoding detected by PyYAML) or str.

    Returns:
        UTF-8 encoded JSON.

    Raises:
        TranscodeError: If the YAML does not parse, its top level is not a
            mapping, or a value has no JSON representation (binary, NaN, ...).
    """
    try:
        decoded = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        msg = f"cannot parse YAML: {exc}"
        raise TranscodeError(msg) from exc

    if not isinstance(decoded, Mapping):
        msg = f"top-level YAML value must be a mapping, got {type(decoded).__name__}"
        raise TranscodeError(msg)

    try:
        encoded = json.dumps(
            _string_keys(decoded),
            sort_keys=True,
            separators=(",", ":"),
            allow_nan=False,
            ensure_ascii=False,
            default=_json_default,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        msg = f"cannot serialize as JSON: {exc}"
        raise TranscodeError(msg) from exc
    return encoded.encode("utf-8")


def _key_text(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def _string_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {_key_text(k): _string_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_string_keys(item) for item in value]
    return value


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)
