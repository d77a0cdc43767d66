"""
HMAC signing for the HS256 / HS384 / HS512 algorithms.

The same lookup is used when issuing and when verifying a token, so a header
naming anything outside this table is rejected on both paths.
"""

from __future__ import annotations

import hashlib
import hmac
from enum import Enum
from typing import Any, Callable, Union

from .errors import InvalidKeyError, UnsupportedAlgorithmError

Key = Union[str, bytes]


class Algorithm(str, Enum):
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"

    @property
    def hash_func(self) -> Callable[..., Any]:
        return _HASHES[self]

    @property
    def digest_size(self) -> int:
        return self.hash_func().digest_size

    @classmethod
    def from_name(cls, method: Any) -> "Algorithm":
        """Resolve an algorithm name (case-sensitive) or pass a member through."""
        if isinstance(method, cls):
            return method
        if isinstance(method, str):
            try:
                return cls(method)
            except ValueError:
                pass
        raise UnsupportedAlgorithmError(f"Algorithm not supported: {method!r}")


_HASHES = {
    Algorithm.HS256: hashlib.sha256,
    Algorithm.HS384: hashlib.sha384,
    Algorithm.HS512: hashlib.sha512,
}

SUPPORTED_ALGORITHMS = tuple(a.value for a in Algorithm)


def _key_bytes(key: Any) -> bytes:
    if isinstance(key, str):
        key = key.encode("utf-8")
    elif isinstance(key, bytearray):
        key = bytes(key)
    if not isinstance(key, bytes) or not key:
        raise InvalidKeyError()
    return key


def sign(message: Union[str, bytes], key: Key, method: Union[str, Algorithm] = "HS256") -> bytes:
    """Return the raw HMAC digest of ``message``."""
    alg = Algorithm.from_name(method)
    if isinstance(message, str):
        message = message.encode("utf-8")
    return hmac.new(_key_bytes(key), message, alg.hash_func).digest()


def verify_signature(
    message: Union[str, bytes],
    signature: bytes,
    key: Key,
    method: Union[str, Algorithm],
) -> bool:
    """Recompute the HMAC and compare in constant time."""
    expected = sign(message, key, method)
    return hmac.compare_digest(expected, signature)
