"""
JSON helpers with explicit error surfacing.

json.dumps/json.loads raise a mix of TypeError, ValueError and RecursionError;
here every failure becomes EncodingError or JSONParseError with a ``reason``.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Union

from . import config
from .errors import EncodingError, JSONParseError

_MESSAGES = {
    "depth": "Maximum stack depth exceeded",
    "ctrl_char": "Unexpected control character found",
    "syntax": "Syntax error, malformed JSON",
    "utf8": "Malformed UTF-8 characters",
    "null_result": "Null result with non-null input",
}


def json_encode(value: Any, ensure_ascii: Optional[bool] = None) -> str:
    """
    Serialize ``value`` to compact JSON.
    NaN/Infinity are rejected instead of producing non-standard JSON.
    """
    if ensure_ascii is None:
        ensure_ascii = config.get_json_ensure_ascii()
    try:
        text = json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=ensure_ascii,
            allow_nan=False,
        )
    except RecursionError as e:
        raise EncodingError(_MESSAGES["depth"], reason="depth") from e
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Unknown JSON error: {e}", reason="unknown") from e

    if not text or (text == "null" and value is not None):
        raise EncodingError(_MESSAGES["null_result"], reason="null_result")
    return text


def json_decode(data: Union[str, bytes]) -> Any:
    """Parse JSON text (or UTF-8 bytes)."""
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise JSONParseError(_MESSAGES["utf8"], reason="utf8") from e
    try:
        return json.loads(data)
    except RecursionError as e:
        raise JSONParseError(_MESSAGES["depth"], reason="depth") from e
    except json.JSONDecodeError as e:
        reason = "ctrl_char" if e.msg.startswith("Invalid control character") else "syntax"
        raise JSONParseError(_MESSAGES[reason], reason=reason) from e
    except ValueError as e:
        # e.g. integers past sys.get_int_max_str_digits()
        raise JSONParseError(f"Unknown JSON error: {e}", reason="unknown") from e
