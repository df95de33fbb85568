"""
JSON codec between the open market wire format and the contract models.

Wire keys are snake_case, contract field naming is camelCase. ``decode``
converts every object key before validation and ``encode`` converts them back,
dropping unset optional fields so modification payloads stay sparse.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel, to_snake
from pydantic_core import PydanticSerializationError

from openmarket.integrations.errors import (
    DecodeError,
    EncodingError,
    InvalidTimestamp,
    MissingField,
    TypeMismatch,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_TIMESTAMP_ERRORS = {"invalid_timestamp"}
_MISSING_ERRORS = {"missing"}


def convert_keys(value: Any, transform: Callable[[str], str]) -> Any:
    """Apply ``transform`` to every object key, recursing into lists and objects."""
    if isinstance(value, dict):
        return {
            (transform(key) if isinstance(key, str) else key): convert_keys(item, transform)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [convert_keys(item, transform) for item in value]
    return value


def decode(data: bytes, target: Type[ModelT]) -> ModelT:
    """Decode a wire JSON document into ``target``."""
    try:
        document = json.loads(data)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"Body is not a JSON document: {exc}") from exc

    try:
        return target.model_validate(convert_keys(document, to_camel))
    except ValidationError as exc:
        error = _classify_validation_error(exc, target)
        logger.debug("Decoding %s failed: %s", target.__name__, error)
        raise error from exc


def encode(value: BaseModel) -> bytes:
    """Encode a contract model into wire JSON bytes."""
    if not isinstance(value, BaseModel):
        raise EncodingError(f"Cannot encode {type(value).__name__}; expected a contract model")
    try:
        document = value.model_dump(mode="json", by_alias=True, exclude_none=True)
        text = json.dumps(convert_keys(document, to_snake), ensure_ascii=False, separators=(",", ":"))
        return text.encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise EncodingError(f"Failed to encode {type(value).__name__}: {exc}") from exc


def _classify_validation_error(exc: ValidationError, target: Type[BaseModel]) -> DecodeError:
    errors: List[Dict[str, Any]] = exc.errors(include_url=False)
    first = errors[0]
    field = tuple(to_snake(part) if isinstance(part, str) else part for part in first["loc"])
    dotted = ".".join(str(part) for part in field)
    payload = {"target": target.__name__, "errors": errors}

    if first["type"] in _MISSING_ERRORS:
        return MissingField(f"{target.__name__}: missing required field '{dotted}'", field=field, payload=payload)
    if first["type"] in _TIMESTAMP_ERRORS:
        return InvalidTimestamp(f"{target.__name__}: {first['msg']} (field '{dotted}')", field=field, payload=payload)
    return TypeMismatch(f"{target.__name__}: {first['msg']} (field '{dotted}')", field=field, payload=payload)


__all__ = ["convert_keys", "decode", "encode"]
