"""Utility modules."""

from presenter_hub.utils.error_handling import (
    AppException,
    ConfigurationError,
    ExportError,
    GenerationError,
    IdentifierGenerationError,
    LLMError,
    StorageError,
    format_exception_for_logging,
)
from presenter_hub.utils.logging_config import get_logger, setup_logging

__all__ = [
    # Error handling
    "AppException",
    "ConfigurationError",
    "ExportError",
    "GenerationError",
    "IdentifierGenerationError",
    "LLMError",
    "StorageError",
    "format_exception_for_logging",
    # Logging
    "get_logger",
    "setup_logging",
]
