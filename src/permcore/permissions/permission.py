"""Permission values and their canonical string form.

A permission binds an action to a role::

    read("any")
    update("user:5f1a")
    delete("team:ops/owner")

Provides:
- ``Permission``: value object with ``parse`` / ``to_string``.
- ``aggregate()``: expand aggregate actions (``write``) into primitives.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..exceptions import ParseErrorKind, PermissionParseError
from ..logging import safe_preview
from .constants import AGGREGATES, PERMISSIONS, PermissionType
from .role import Role, split_role

logger = logging.getLogger(__name__)

_OPEN = '("'
_CLOSE = '")'


class Permission:
    """An action granted to a role.

    Args:
        action: Action keyword (``"read"``, ``"write"``, ...). Not checked
            against any known set here.
        role: Role kind (``"user"``, ``"team"``, ``"any"``, ...).
        identifier: Optional role instance, e.g. a user ID.
        dimension: Optional sub-scope of the role, e.g. a team role.

    Example::

        Permission("read", "user", "5f1a").to_string()  # 'read("user:5f1a")'
        Permission.parse('delete("team:ops/owner")').dimension  # 'owner'
        Permission.update(Role.team("ops"))  # 'update("team:ops")'
    """

    __slots__ = ("_action", "_role")

    def __init__(self, action: str, role: str, identifier: str = "", dimension: str = "") -> None:
        self._action = action
        self._role = Role(role, identifier, dimension)

    @classmethod
    def from_role(cls, action: str, role: Role) -> Permission:
        """Build a permission granting ``action`` to an existing :class:`Role`."""
        return cls(action, role.kind, role.identifier, role.dimension)

    @property
    def action(self) -> str:
        return self._action

    @property
    def role(self) -> str:
        """Role kind, without identifier or dimension."""
        return self._role.kind

    @property
    def identifier(self) -> str:
        return self._role.identifier

    @property
    def dimension(self) -> str:
        return self._role.dimension

    def as_role(self) -> Role:
        return self._role

    def to_string(self) -> str:
        """Serialize to ``action("role[:identifier][/dimension]")``."""
        return f"{self._action}{_OPEN}{self._role.to_string()}{_CLOSE}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"Permission(action={self._action!r}, role={self.role!r}, "
            f"identifier={self.identifier!r}, dimension={self.dimension!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self._action == other._action and self._role == other._role

    def __hash__(self) -> int:
        return hash((self._action, self._role))

    @classmethod
    def parse(cls, text: str) -> Permission:
        """Parse a canonical permission string.

        Every ``")`` in the role part is removed, not only the trailing one.

        Raises:
            PermissionParseError: ``MALFORMED_FORMAT`` if ``text`` does not
                split into exactly two parts on ``("``;
                ``MULTIPLE_DIMENSIONS`` if the role has more than one ``/``;
                ``EMPTY_DIMENSION`` if nothing follows the ``/``.
        """
        parts = text.split(_OPEN)
        if len(parts) != 2:
            logger.debug("Malformed permission string: %s", safe_preview(text))
            raise PermissionParseError(
                ParseErrorKind.MALFORMED_FORMAT,
                text,
                f'Invalid permission string format: "{text}".',
            )

        action = parts[0]
        full_role = parts[1].replace(_CLOSE, "")

        try:
            role = split_role(full_role, source=text)
        except PermissionParseError as e:
            logger.debug("Invalid role in permission %s: %s", safe_preview(text), e.message)
            raise

        return cls.from_role(action, role)

    @classmethod
    def aggregate(
        cls,
        permissions: Optional[Iterable[str]],
        allowed: Iterable[str] = PERMISSIONS,
    ) -> Optional[list[str]]:
        """See :func:`aggregate`."""
        return aggregate(permissions, allowed)

    # ── Builders ────────────────────────────────────────

    @staticmethod
    def read(role: Role) -> str:
        """Build a read permission string for ``role``."""
        return Permission.from_role(PermissionType.READ, role).to_string()

    @staticmethod
    def create(role: Role) -> str:
        """Build a create permission string for ``role``."""
        return Permission.from_role(PermissionType.CREATE, role).to_string()

    @staticmethod
    def update(role: Role) -> str:
        """Build an update permission string for ``role``."""
        return Permission.from_role(PermissionType.UPDATE, role).to_string()

    @staticmethod
    def delete(role: Role) -> str:
        """Build a delete permission string for ``role``."""
        return Permission.from_role(PermissionType.DELETE, role).to_string()

    @staticmethod
    def write(role: Role) -> str:
        """Build an aggregate write permission string for ``role``.

        Pass the result through :func:`aggregate` before storing it.
        """
        return Permission.from_role(PermissionType.WRITE, role).to_string()


def aggregate(
    permissions: Optional[Iterable[str]],
    allowed: Iterable[str] = PERMISSIONS,
) -> Optional[list[str]]:
    """Map aggregate permissions to the primitive permissions they represent.

    Each input string is parsed and checked against every entry of
    :data:`AGGREGATES`. On each entry it does not match, the permission is
    appended unchanged; on a match, one permission per primitive of that
    aggregate is appended instead, skipping primitives not in ``allowed``.
    With a single aggregate defined this yields one copy per
    non-aggregate input.

    Args:
        permissions: Permission strings, or None when none were specified.
        allowed: Primitive actions an aggregate may expand into.

    Returns:
        Flat list of permission strings in input order, or None if
        ``permissions`` is None.

    Raises:
        PermissionParseError: Any element is malformed. Nothing is returned
            for the rest of the batch.

    Example::

        >>> aggregate(['write("user:1")', 'read("any")'], ["create", "read", "update"])
        ['create("user:1")', 'update("user:1")', 'read("any")']
    """
    if permissions is None:
        return None

    allowed_set = frozenset(allowed)
    mutated: list[str] = []

    for raw in permissions:
        permission = Permission.parse(raw)
        for aggregate_type, sub_types in AGGREGATES.items():
            if permission.action != aggregate_type:
                mutated.append(permission.to_string())
                continue

            logger.debug("Expanding %s into %s", safe_preview(raw), ", ".join(sub_types))
            for sub_type in sub_types:
                if sub_type not in allowed_set:
                    logger.debug("Dropping %s for %s: not allowed", sub_type, safe_preview(raw))
                    continue
                mutated.append(Permission.from_role(sub_type, permission.as_role()).to_string())

    return mutated


__all__ = [
    "Permission",
    "aggregate",
]
