"""
Error taxonomy for the open market integration layer.

Every failure raised by the resolver, codec, multipart builder, executor or
client facade derives from ``OpenMarketError`` so callers can catch the whole
family in one place. Nothing in this layer retries; a raised error is final
for that call.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

FieldPath = Tuple[Union[str, int], ...]


class OpenMarketError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------

class NetworkError(OpenMarketError):
    """Raised by the request executor."""


class TransportFailure(NetworkError):
    """DNS failure, refused connection, timeout, TLS or protocol error."""


class HttpError(NetworkError):
    def __init__(self, status_code: int, body: bytes = b"") -> None:
        super().__init__(f"Unexpected HTTP status {status_code}", payload={"status_code": status_code})
        self.status_code = status_code
        self.body = body


class EmptyBody(NetworkError):
    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Response with status {status_code} carried no body",
            payload={"status_code": status_code},
        )
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------

class DecodeError(OpenMarketError):
    """Raised directly when the body is not a JSON document at all."""

    def __init__(self, message: str, *, field: FieldPath = (), payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, payload=payload)
        self.field = field

    @property
    def field_name(self) -> str:
        return ".".join(str(part) for part in self.field)


class MissingField(DecodeError):
    pass


class TypeMismatch(DecodeError):
    pass


class InvalidTimestamp(DecodeError):
    pass


class EncodingError(OpenMarketError):
    pass


# ---------------------------------------------------------------------------
# Endpoint resolution
# ---------------------------------------------------------------------------

class InvalidParameters(OpenMarketError, ValueError):
    pass


__all__ = [
    "OpenMarketError",
    "NetworkError",
    "TransportFailure",
    "HttpError",
    "EmptyBody",
    "DecodeError",
    "MissingField",
    "TypeMismatch",
    "InvalidTimestamp",
    "EncodingError",
    "InvalidParameters",
]
