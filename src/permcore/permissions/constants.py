"""Permission type constants and the aggregate table.

Provides:
- ``PermissionType``: action keywords used in permission strings.
- ``PERMISSIONS``: the default allow-list of primitive actions.
- ``AGGREGATES``: aggregate action → primitive actions it stands for.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


class PermissionType:
    """Action keywords that appear before ``("`` in a permission string.

    ``WRITE`` is an aggregate: it never reaches storage as-is, but is
    expanded by :func:`permcore.permissions.aggregate` into
    ``CREATE``, ``UPDATE`` and ``DELETE``.
    """

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    WRITE = "write"


# Primitive actions, in the order callers usually list them.
PERMISSIONS: tuple[str, ...] = (
    PermissionType.CREATE,
    PermissionType.READ,
    PermissionType.UPDATE,
    PermissionType.DELETE,
)

# Expansion order follows the tuple order.
AGGREGATES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        PermissionType.WRITE: (
            PermissionType.CREATE,
            PermissionType.UPDATE,
            PermissionType.DELETE,
        ),
    }
)


__all__ = [
    "AGGREGATES",
    "PERMISSIONS",
    "PermissionType",
]
