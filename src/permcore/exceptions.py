"""Exception hierarchy for permcore.

All errors inherit from PermcoreError. This module provides:
- Base exception hierarchy with stable error codes
- ParseErrorKind for telling the permission-string failures apart

Usage:
    from permcore.exceptions import PermissionParseError, ParseErrorKind

    try:
        Permission.parse(raw)
    except PermissionParseError as e:
        if e.kind is ParseErrorKind.EMPTY_DIMENSION:
            ...
"""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = [
    "PermcoreError",
    "ConfigurationError",
    "PermissionParseError",
    "ParseErrorKind",
]


# ---- Exception Hierarchy ----------------------------------------------------


class PermcoreError(Exception):
    """Base exception for permcore.

    Attributes:
        code: Stable error code string (e.g. "PERMISSION_PARSE_ERROR").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(PermcoreError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"


class ParseErrorKind(str, Enum):
    """Distinct reasons a permission string can be rejected."""

    MALFORMED_FORMAT = "malformed_format"
    MULTIPLE_DIMENSIONS = "multiple_dimensions"
    EMPTY_DIMENSION = "empty_dimension"


class PermissionParseError(PermcoreError):
    """A permission or role string does not follow the canonical grammar.

    Attributes:
        kind: Which grammar rule was violated.
        value: The offending raw input, unmodified.
    """

    code: str = "PERMISSION_PARSE_ERROR"
    message: str = "Invalid permission format"

    def __init__(self, kind: ParseErrorKind, value: str, message: str | None = None) -> None:
        self.kind = kind
        self.value = value
        super().__init__(message, kind=kind.value, value=value)
