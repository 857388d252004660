from .permissions import (
    AGGREGATES,
    PERMISSIONS,
    Permission,
    PermissionType,
    Role,
    aggregate,
)
from .config import PermcoreConfig, LogLevel, load_config_from_env
from .exceptions import (
    PermcoreError,
    ConfigurationError,
    PermissionParseError,
    ParseErrorKind,
)
from .logging import safe_preview, PermcoreFormatter, setup_logging

__all__ = [
    'AGGREGATES',
    'PERMISSIONS',
    'Permission',
    'PermissionType',
    'Role',
    'aggregate',
    'PermcoreConfig',
    'LogLevel',
    'load_config_from_env',
    'PermcoreError',
    'ConfigurationError',
    'PermissionParseError',
    'ParseErrorKind',
    'safe_preview',
    'PermcoreFormatter',
    'setup_logging',
]
