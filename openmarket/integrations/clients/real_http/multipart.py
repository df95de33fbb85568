"""
multipart/form-data body builder for product registration.

Layout:
    --<boundary>\\r\\n
    Content-Disposition: form-data; name="params"
    Content-Type: application/json
    \\r\\n
    <sales information JSON>
    \\r\\n--<boundary>\\r\\n
    Content-Disposition: form-data; name="images"; filename="<name>"
    Content-Type: <guessed from name>
    \\r\\n
    <image bytes>
    ...
    \\r\\n--<boundary>--

A new boundary is generated on every call.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from typing import List, Mapping, Optional
from uuid import uuid4

from openmarket.integrations.errors import EncodingError

CRLF = b"\r\n"
PARAMS_FIELD = "params"
IMAGES_FIELD = "images"


@dataclass(frozen=True)
class MultipartBody:
    boundary: str
    content: bytes

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"


def new_boundary() -> str:
    return f"Boundary-{uuid4().hex}"


def build_multipart_body(
    json_part: bytes,
    images: Mapping[str, bytes],
    boundary: Optional[str] = None,
) -> MultipartBody:
    """Build the registration body; images are written in mapping order."""
    boundary = boundary or new_boundary()
    if not isinstance(json_part, (bytes, bytearray)):
        raise EncodingError(f"JSON part must be bytes; got {type(json_part).__name__}")

    delimiter = f"--{boundary}".encode("ascii")
    chunks: List[bytes] = [
        delimiter,
        CRLF,
        _headers(f'form-data; name="{PARAMS_FIELD}"'.encode("ascii"), "application/json"),
        CRLF,
        bytes(json_part),
    ]

    for filename, image in images.items():
        encoded_name = _encode_filename(filename)
        if not isinstance(image, (bytes, bytearray)):
            raise EncodingError(f"Image {filename!r} must be bytes; got {type(image).__name__}")
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        chunks.extend([
            CRLF,
            delimiter,
            CRLF,
            _headers(
                f'form-data; name="{IMAGES_FIELD}"; filename="'.encode("ascii") + encoded_name + b'"',
                content_type,
            ),
            CRLF,
            bytes(image),
        ])

    chunks.extend([CRLF, delimiter, b"--"])
    return MultipartBody(boundary=boundary, content=b"".join(chunks))


def _headers(disposition: bytes, content_type: str) -> bytes:
    return (
        b"Content-Disposition: " + disposition + CRLF
        + b"Content-Type: " + content_type.encode("ascii") + CRLF
    )


def _encode_filename(filename: str) -> bytes:
    if not isinstance(filename, str) or not filename:
        raise EncodingError(f"Image filename must be a non-empty string; got {filename!r}")
    if any(char in filename for char in ('"', "\r", "\n")):
        raise EncodingError(f"Image filename {filename!r} cannot be placed in a part header")
    try:
        return filename.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"Image filename {filename!r} is not representable as UTF-8") from exc


__all__ = ["MultipartBody", "build_multipart_body", "new_boundary", "PARAMS_FIELD", "IMAGES_FIELD"]
