"""
JWT encode/decode with HMAC signatures (HS256, HS384, HS512).
Base64url without padding, compact JSON, constant-time signature check.
Claims are not interpreted here; exp/iss/aud checks belong to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Union

from . import config
from .algorithms import Algorithm, Key, sign, verify_signature
from .b64 import urlsafe_b64decode, urlsafe_b64encode
from .errors import (
    DecodeError,
    HeaderUnreadableError,
    InvalidAlgorithmError,
    InvalidSignatureError,
    JSONParseError,
    JWTError,
    MalformedTokenError,
    PayloadUnreadableError,
)
from .json_codec import json_decode, json_encode

logger = logging.getLogger(__name__)


def encode(payload: Any, key: Key, algo: Union[str, Algorithm, None] = "HS256") -> str:
    """
    Encode and sign a JWT.
    ``algo`` of None means the configured default algorithm (JWT_ALGORITHM).
    """
    alg = config.get_default_algorithm() if algo is None else Algorithm.from_name(algo)
    header = {"typ": "JWT", "alg": alg.value}
    header_b64 = urlsafe_b64encode(json_encode(header))
    payload_b64 = urlsafe_b64encode(json_encode(payload))
    signing_input = f"{header_b64}.{payload_b64}"
    signature = sign(signing_input, key, alg)
    return f"{signing_input}.{urlsafe_b64encode(signature)}"


def split_token(token: Union[str, bytes]) -> Tuple[str, str, str]:
    """Split a token into its three encoded segments."""
    if isinstance(token, (bytes, bytearray)):
        try:
            token = bytes(token).decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedTokenError("Token is not ASCII") from e
    if not isinstance(token, str):
        raise MalformedTokenError(f"Token must be a string, got {type(token).__name__}")
    parts = token.split(".")
    if len(parts) != 3:
        raise MalformedTokenError()
    header_b64, payload_b64, sig_b64 = parts
    return header_b64, payload_b64, sig_b64


def _read_segment(segment: str, error_cls: type) -> Any:
    try:
        value = json_decode(urlsafe_b64decode(segment))
    except (DecodeError, JSONParseError) as e:
        raise error_cls(f"{error_cls.default_message}: {e}") from e
    if not value:
        raise error_cls(f"{error_cls.default_message}: empty")
    return value


def _read_header(segment: str) -> Dict[str, Any]:
    header = _read_segment(segment, HeaderUnreadableError)
    if not isinstance(header, dict):
        raise HeaderUnreadableError(f"{HeaderUnreadableError.default_message}: not a JSON object")
    return header


def get_unverified_header(token: Union[str, bytes]) -> Dict[str, Any]:
    """Return the header without checking the signature (e.g. to pick a key by 'alg')."""
    header_b64, _, _ = split_token(token)
    return _read_header(header_b64)


def _verify(header: Dict[str, Any], header_b64: str, payload_b64: str, sig_b64: str, key: Optional[Key]) -> None:
    alg = header.get("alg")
    if not alg:
        raise InvalidAlgorithmError()
    alg = Algorithm.from_name(alg)

    try:
        claimed = urlsafe_b64decode(sig_b64)
    except DecodeError as e:
        raise InvalidSignatureError(f"Invalid signature encoding: {e}") from e

    # Non-canonical encodings (stray trailing bits) decode to the same bytes; reject them too.
    if not (
        verify_signature(f"{header_b64}.{payload_b64}", claimed, key, alg)
        and urlsafe_b64encode(claimed) == sig_b64
    ):
        raise InvalidSignatureError()


def decode(token: Union[str, bytes], verify: bool = False, key: Optional[Key] = None) -> Dict[str, Any]:
    """
    Decode a JWT into {"header": ..., "payload": ...}.
    - verify=False: only parses; the signature segment is not even decoded.
    - verify=True: recomputes the HMAC with ``key`` and the header's 'alg'.
    Raises a JWTError subclass on any failure.
    """
    try:
        header_b64, payload_b64, sig_b64 = split_token(token)
        header = _read_header(header_b64)
        payload = _read_segment(payload_b64, PayloadUnreadableError)
        if verify:
            _verify(header, header_b64, payload_b64, sig_b64, key)
    except JWTError as e:
        logger.debug("JWT decode rejected: %s", e.code)
        raise

    return {"header": header, "payload": payload}
