"""Permission strings for record-level access control.

Defines:
- Permission: action bound to a role, with parse/serialize
- Role: kind[:identifier][/dimension] identity reference
- PermissionType: action keywords
- PERMISSIONS: default allow-list of primitive actions
- AGGREGATES: aggregate action → primitive actions
- aggregate(): expand aggregate actions in a list of permission strings
"""

from .constants import AGGREGATES, PERMISSIONS, PermissionType
from .permission import Permission, aggregate
from .role import Role

__all__ = [
    "AGGREGATES",
    "PERMISSIONS",
    "Permission",
    "PermissionType",
    "Role",
    "aggregate",
]
