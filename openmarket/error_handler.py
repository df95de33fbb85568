"""Turns open market failures into the payload a UI shows in an alert."""
from typing import Any, Dict
import logging

from openmarket.integrations.errors import (
    DecodeError,
    EncodingError,
    HttpError,
    InvalidParameters,
    NetworkError,
    OpenMarketError,
)

logger = logging.getLogger(__name__)

NETWORK_ERROR_TITLE = "Network error"


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        if not isinstance(exc, OpenMarketError):
            logger.error("Unhandled exception in open market client: %s", exc, exc_info=True)
            return self._payload("Error", "An unexpected error occurred. Please try again later.", False, exc, context)

        logger.warning("Open market request failed: %s", exc)
        if isinstance(exc, HttpError):
            retryable = exc.status_code >= 500
            message = f"The server answered with status {exc.status_code}."
        elif isinstance(exc, NetworkError):
            retryable = True
            message = "Could not load data from the server."
        elif isinstance(exc, DecodeError):
            retryable = False
            message = "The server sent data that could not be read."
        elif isinstance(exc, (EncodingError, InvalidParameters)):
            retryable = False
            message = "The request could not be built."
        else:
            retryable = False
            message = "The request failed."
        return self._payload(NETWORK_ERROR_TITLE, f"{message}\n{exc}", retryable, exc, context)

    @staticmethod
    def _payload(title: str, message: str, retryable: bool, exc: Exception, context: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "title": title,
            "message": message,
            "retryable": retryable,
            "metadata": {"error": str(exc), "error_type": type(exc).__name__, "context": context or {}},
        }
