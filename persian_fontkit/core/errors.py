"""
Exception hierarchy for font optimization.

Validation-type errors (ValidationError, UnsupportedFormatError,
InvalidFontError) reach callers unchanged; everything else that goes wrong
while optimizing is reported as FontOptimizationError.
"""

from collections.abc import Sequence
from typing import Any


class FontKitError(Exception):
    """Base exception for all persian-fontkit errors."""

    code = "FONTKIT_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FontOptimizationError(FontKitError):
    """Raised when a font could not be transformed."""

    code = "FONT_OPTIMIZATION_ERROR"

    def __init__(
        self, message: str, font_path: str, cause: BaseException | None = None
    ):
        super().__init__(message)
        self.font_path = font_path
        self.cause = cause


class ValidationError(FontKitError):
    """Raised when a request field is missing or out of range."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class FileOperationError(FontKitError):
    """Raised when a filesystem operation fails."""

    code = "FILE_OPERATION_ERROR"

    def __init__(
        self,
        message: str,
        file_path: str,
        operation: str,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation  # "read", "write", "delete" or "create"
        self.cause = cause


class UnsupportedFormatError(FontKitError):
    """Raised for an input extension or output format outside the supported set."""

    code = "UNSUPPORTED_FORMAT_ERROR"

    def __init__(self, message: str, format: str, supported_formats: Sequence[str]):
        super().__init__(message)
        self.format = format
        self.supported_formats = list(supported_formats)


class InvalidFontError(FontKitError):
    """Raised when a font file is empty or fails its signature check."""

    code = "INVALID_FONT_ERROR"

    def __init__(self, message: str, font_path: str, reason: str | None = None):
        super().__init__(message)
        self.font_path = font_path
        self.reason = reason


# Errors the pipeline re-raises without wrapping
PASSTHROUGH_ERRORS = (ValidationError, UnsupportedFormatError, InvalidFontError)
