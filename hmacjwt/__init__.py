"""
hmacjwt: HMAC-signed JSON Web Tokens (HS256 / HS384 / HS512).
"""
from . import config
from .algorithms import SUPPORTED_ALGORITHMS, Algorithm, sign, verify_signature
from .b64 import urlsafe_b64decode, urlsafe_b64encode
from .errors import (
    DecodeError,
    EncodingError,
    HeaderUnreadableError,
    InvalidAlgorithmError,
    InvalidKeyError,
    InvalidSignatureError,
    JSONParseError,
    JWTError,
    MalformedTokenError,
    PayloadUnreadableError,
    UnsupportedAlgorithmError,
)
from .json_codec import json_decode, json_encode
from .jwt import decode, encode, get_unverified_header, split_token

__all__ = [
    "config",
    "encode",
    "decode",
    "split_token",
    "get_unverified_header",
    "sign",
    "verify_signature",
    "Algorithm",
    "SUPPORTED_ALGORITHMS",
    "urlsafe_b64encode",
    "urlsafe_b64decode",
    "json_encode",
    "json_decode",
    "JWTError",
    "MalformedTokenError",
    "HeaderUnreadableError",
    "PayloadUnreadableError",
    "InvalidAlgorithmError",
    "InvalidSignatureError",
    "UnsupportedAlgorithmError",
    "InvalidKeyError",
    "DecodeError",
    "EncodingError",
    "JSONParseError",
]
