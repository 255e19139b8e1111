"""Exception hierarchy shared across the application.

Parsing never raises for malformed text; these exceptions cover the
infrastructure failures that do propagate (transport, storage, identifiers,
export, configuration).
"""

import traceback
from typing import Any, Dict, Optional


class AppException(Exception):
    """Base exception for application errors.

    Attributes:
        message: Human readable error message
        details: Optional structured context for logging
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Return a serializable representation of the error."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(AppException):
    """Raised when configuration loading or validation fails."""

    pass


class GenerationError(AppException):
    """Raised when the generation proxy cannot be reached or answers non-2xx."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message, details={"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body


class LLMError(AppException):
    """Raised when the language model call fails inside the proxy."""

    pass


class StorageError(AppException):
    """Raised when the persisted deck collection cannot be written."""

    pass


class IdentifierGenerationError(AppException):
    """Raised when a deck identifier cannot be generated."""

    pass


class ExportError(AppException):
    """Raised when a deck cannot be exported to a file."""

    pass


def format_exception_for_logging(exc: BaseException) -> Dict[str, Any]:
    """Flatten an exception into a dict suitable for ``extra=`` logging.

    Args:
        exc: The exception to describe

    Returns:
        Dictionary with type, message, details and formatted traceback
    """
    info: Dict[str, Any] = {
        "error_type": type(exc).__name__,
        "error_message": str(exc),
        "traceback": "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        ),
    }
    if isinstance(exc, AppException):
        info["error_details"] = exc.details
    return info
