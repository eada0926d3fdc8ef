# -*- coding: utf-8 -*-
"""sheetcsv Exception Hierarchy.

Exception Hierarchy:
    SheetCsvException (base)
    ├── AddressException
    │   └── MalformedAddress
    └── CodecException
        └── DialectError

Every exception carries rich context:
- error_code: Unique error identifier (e.g. "SHEETCSV_MALFORMED_ADDRESS")
- context: Dictionary with error-specific details
- timestamp: When the error occurred

I/O failures raised by the underlying streams (OSError, UnicodeDecodeError)
are deliberately not wrapped; they reach the caller unchanged.

Example:
    >>> from sheetcsv.exceptions import MalformedAddress
    >>> raise MalformedAddress(
    ...     message="Column letter C appears in row number",
    ...     address="B3C",
    ...     character="C",
    ...     position=2,
    ... )
"""

from __future__ import annotations

import json
import re
from datetime import datetime
from typing import Any, Dict, Optional


# ==============================================================================
# Base Exception
# ==============================================================================

class SheetCsvException(Exception):
    """Base exception for all sheetcsv errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error identifier
        context: Dictionary with error-specific details
        timestamp: When the error occurred
    """

    ERROR_PREFIX = "SHEETCSV"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._generate_error_code()
        self.context = context or {}
        self.timestamp = datetime.now()

    def _generate_error_code(self) -> str:
        """Generate an error code from the class name.

        Returns:
            Error code like "SHEETCSV_MALFORMED_ADDRESS"
        """
        error_type = re.sub(r"(?<!^)(?=[A-Z])", "_", self.__class__.__name__).upper()
        return f"{self.ERROR_PREFIX}_{error_type}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        """Convert exception to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def __str__(self) -> str:
        return f"[{self.error_code}] - {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}')"
        )


# ==============================================================================
# Address Exceptions
# ==============================================================================

class AddressException(SheetCsvException):
    """Base exception for cell address errors."""


class MalformedAddress(AddressException):
    """A cell address string could not be parsed.

    Raised when a character outside ``[A-Za-z0-9]`` appears, or when a
    column letter follows a row digit.

    Example:
        >>> raise MalformedAddress(
        ...     message="Invalid character $",
        ...     address="$A$1",
        ...     character="$",
        ...     position=0,
        ... )
    """

    def __init__(
        self,
        message: str,
        address: Optional[str] = None,
        character: Optional[str] = None,
        position: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = context or {}
        if address is not None:
            context["address"] = address
        if character is not None:
            context["character"] = character
        if position is not None:
            context["position"] = position
        super().__init__(message, context=context)
        self.address = address
        self.character = character
        self.position = position


# ==============================================================================
# Codec Exceptions
# ==============================================================================

class CodecException(SheetCsvException):
    """Base exception for CSV codec errors."""


class DialectError(CodecException):
    """The codec configuration (delimiter, escape, newline, encoding) is invalid.

    Example:
        >>> raise DialectError(
        ...     message="delimiter must be a single character",
        ...     field="delimiter",
        ...     value=",,",
        ... )
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = context or {}
        if field is not None:
            context["field"] = field
            context["value"] = value
        super().__init__(message, context=context)
        self.field = field


__all__ = [
    "SheetCsvException",
    "AddressException",
    "MalformedAddress",
    "CodecException",
    "DialectError",
]
