"""Configuration contract for permcore.

This module provides Pydantic-validated configuration for the settings
permcore needs at runtime: logging and the allow-list of primitive
permission types that aggregate actions may expand into.

Direct os.environ/os.getenv usage is FORBIDDEN outside
:func:`load_config_from_env`.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

_ACTION_RE = re.compile(r"^[a-z][a-z0-9_]*$")


def _default_permissions() -> list[str]:
    from .permissions.constants import PERMISSIONS

    return list(PERMISSIONS)


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class PermcoreConfig(BaseModel):
    """Runtime configuration for permcore.

    ``allowed_permissions`` is the allow-list handed to
    :func:`permcore.permissions.aggregate` when callers go through
    :meth:`aggregate` instead of passing one explicitly.
    """

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )

    # Permission types aggregates are allowed to expand into
    allowed_permissions: list[str] = Field(
        default_factory=_default_permissions,
        description="Primitive permission types (e.g. create, read, update, delete)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    @field_validator("allowed_permissions")
    @classmethod
    def validate_allowed_permissions(cls, v: list[str]) -> list[str]:
        """Reject empty lists and entries that could not appear as an action."""
        if not v:
            raise ValueError("allowed_permissions must not be empty")
        for action in v:
            if not _ACTION_RE.match(action):
                raise ValueError(f"Invalid permission type: {action!r}")
        return v

    def aggregate(self, permissions: Optional[list[str]]) -> Optional[list[str]]:
        """Expand aggregate permissions against the configured allow-list."""
        from .permissions.permission import aggregate

        return aggregate(permissions, self.allowed_permissions)

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",  # Prevent accidental extra fields
    }


def load_config_from_env() -> PermcoreConfig:
    """Load configuration from environment variables.

    This is the ONLY place where os.getenv is allowed.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - PERMCORE_ALLOWED_PERMISSIONS: Comma-separated allow-list
      (default: create,read,update,delete)

    Returns:
        PermcoreConfig instance with values from environment or defaults.

    Raises:
        ConfigurationError: An environment value failed validation.
    """
    import os

    allowed_raw = os.getenv("PERMCORE_ALLOWED_PERMISSIONS", "")
    allowed = [p.strip() for p in allowed_raw.split(",") if p.strip()]

    try:
        return PermcoreConfig(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_json=os.getenv("LOG_JSON", "false").lower() in ("true", "1", "yes"),
            allowed_permissions=allowed or _default_permissions(),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid permcore configuration: {e}", errors=e.errors()) from e


__all__ = [
    "LogLevel",
    "PermcoreConfig",
    "load_config_from_env",
]
