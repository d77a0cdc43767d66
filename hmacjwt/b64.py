"""
URL-safe base64 without padding.
"""

from __future__ import annotations

import base64
import binascii
from typing import Union

from .errors import DecodeError


def urlsafe_b64encode(data: Union[bytes, str]) -> str:
    """Base64url encode without padding."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def urlsafe_b64decode(data: Union[str, bytes]) -> bytes:
    """
    Base64url decode with automatic padding restoration.
    Raises DecodeError on non-ASCII input, characters outside the alphabet
    or a length no padding can fix.
    """
    if isinstance(data, (bytes, bytearray)):
        s = bytes(data)
    elif isinstance(data, str):
        try:
            s = data.encode("ascii")
        except UnicodeEncodeError as e:
            raise DecodeError(f"Invalid base64url data: {e}") from e
    else:
        raise DecodeError(f"Expected str or bytes, got {type(data).__name__}")
    padding = b"=" * (-len(s) % 4)
    try:
        return base64.b64decode(s + padding, altchars=b"-_", validate=True)
    except binascii.Error as e:
        raise DecodeError(f"Invalid base64url data: {e}") from e
