"""
JWT error types.

Every failure is a ``JWTError``, which is a ``ValueError`` so callers that only
care about "reject the token" can catch one type.
"""

from __future__ import annotations

from typing import Optional


class JWTError(ValueError):
    """Base class for all token codec failures."""

    code = "JWT_error"
    default_message = "JWT error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class MalformedTokenError(JWTError):
    code = "JWT_malformed_token"
    default_message = "Token must have exactly three segments"


class HeaderUnreadableError(JWTError):
    code = "JWT_header_unreadable"
    default_message = "Token header could not be decoded"


class PayloadUnreadableError(JWTError):
    code = "JWT_payload_unreadable"
    default_message = "Token payload could not be decoded"


class InvalidAlgorithmError(JWTError):
    code = "JWT_invalid_algorithm"
    default_message = "Token header has no 'alg'"


class InvalidSignatureError(JWTError):
    code = "JWT_invalid_signature"
    default_message = "Signature verification failed"


class UnsupportedAlgorithmError(JWTError):
    code = "JWT_unsupported_algorithm"
    default_message = "Algorithm not supported"


class InvalidKeyError(JWTError):
    code = "JWT_invalid_key"
    default_message = "Signing key must be a non-empty str or bytes"


class DecodeError(JWTError):
    """Invalid base64url input."""

    code = "JWT_decode_error"
    default_message = "Invalid base64url data"


class _JSONError(JWTError):
    def __init__(self, message: Optional[str] = None, reason: str = "unknown"):
        self.reason = reason
        super().__init__(message)


class EncodingError(_JSONError):
    """JSON serialization failed; ``reason`` names the failure kind."""

    code = "JWT_encoding_error"
    default_message = "Unknown JSON error"


class JSONParseError(_JSONError):
    """JSON parsing failed; ``reason`` names the failure kind."""

    code = "JWT_json_parse_error"
    default_message = "Syntax error, malformed JSON"
