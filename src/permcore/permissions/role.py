"""Role references that permissions are granted to.

A role is written ``kind[:identifier][/dimension]``:

    any  # everyone
    users/verified  # every user, narrowed to the "verified" dimension
    user:5f1a  # one specific user
    team:ops/owner  # owners of the "ops" team
"""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import ParseErrorKind, PermissionParseError


@dataclass(frozen=True)
class Role:
    """Identity reference: a role kind with optional identifier and dimension.

    Identifier and dimension are independent; either, both or neither may
    be set. No character validation is done here, so a kind containing
    ``:`` or ``/`` will not survive a round trip through :meth:`parse`.
    """

    kind: str
    identifier: str = ""
    dimension: str = ""

    def to_string(self) -> str:
        """Serialize to ``kind[:identifier][/dimension]``."""
        value = self.kind
        if self.identifier:
            value += f":{self.identifier}"
        if self.dimension:
            value += f"/{self.dimension}"
        return value

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def parse(cls, text: str) -> Role:
        """Parse a role string.

        Raises:
            PermissionParseError: More than one ``/`` was found, or the
                dimension after ``/`` is empty.
        """
        return split_role(text, source=text)

    # ── Builders ────────────────────────────────────────

    @classmethod
    def any(cls) -> Role:
        """Everyone, authenticated or not."""
        return cls("any")

    @classmethod
    def guests(cls) -> Role:
        """Unauthenticated visitors only."""
        return cls("guests")

    @classmethod
    def users(cls, dimension: str = "") -> Role:
        """Every authenticated user, optionally narrowed (e.g. ``"verified"``)."""
        return cls("users", "", dimension)

    @classmethod
    def user(cls, identifier: str, dimension: str = "") -> Role:
        """A single user by ID."""
        return cls("user", identifier, dimension)

    @classmethod
    def team(cls, identifier: str, dimension: str = "") -> Role:
        """Members of a team, optionally only those holding a team role."""
        return cls("team", identifier, dimension)

    @classmethod
    def member(cls, identifier: str) -> Role:
        """A single team membership by ID."""
        return cls("member", identifier)

    @classmethod
    def label(cls, identifier: str) -> Role:
        """Users carrying the given label."""
        return cls("label", identifier)


def split_role(full_role: str, *, source: str) -> Role:
    """Split ``kind[:identifier][/dimension]`` into a :class:`Role`.

    Args:
        full_role: Role text with any surrounding permission syntax removed.
        source: Raw input to report in errors (the whole permission string
            when called from ``Permission.parse``).

    Raises:
        PermissionParseError: With kind ``MULTIPLE_DIMENSIONS`` or
            ``EMPTY_DIMENSION``.
    """
    parts = full_role.split(":")
    kind = parts[0]

    has_identifier = len(parts) > 1
    has_dimension = "/" in full_role

    if not has_identifier and not has_dimension:
        return Role(full_role)

    if has_identifier and not has_dimension:
        return Role(kind, parts[1])

    if not has_identifier and has_dimension:
        kind, dimension = _split_dimension(full_role, source)
        return Role(kind, "", dimension)

    # Identifier and dimension: the dimension hangs off the identifier segment
    identifier, dimension = _split_dimension(parts[1], source)
    return Role(kind, identifier, dimension)


def _split_dimension(segment: str, source: str) -> tuple[str, str]:
    parts = segment.split("/")
    if len(parts) != 2:
        raise PermissionParseError(
            ParseErrorKind.MULTIPLE_DIMENSIONS,
            source,
            "Only one dimension can be provided.",
        )
    if not parts[1]:
        raise PermissionParseError(
            ParseErrorKind.EMPTY_DIMENSION,
            source,
            "Dimension must not be empty.",
        )
    return parts[0], parts[1]


__all__ = [
    "Role",
    "split_role",
]
