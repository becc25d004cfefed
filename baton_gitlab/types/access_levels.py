"""GitLab membership access levels."""

from enum import IntEnum


class AccessLevel(IntEnum):
    """Membership access level, valued by GitLab's numeric code."""

    NONE = 0
    MINIMAL = 5
    GUEST = 10
    REPORTER = 20
    DEVELOPER = 30
    MAINTAINER = 40
    OWNER = 50
    ADMIN = 60

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "AccessLevel":
        """Look up a level by display name; unknown names map to NONE."""
        return _BY_NAME.get(name, cls.NONE)

    @classmethod
    def from_code(cls, code: int) -> "AccessLevel":
        """Look up a level by GitLab code; unknown codes map to NONE."""
        try:
            return cls(code)
        except ValueError:
            return cls.NONE


_BY_NAME = {level.display_name: level for level in AccessLevel}

# Levels offered as entitlements, in ascending privilege order
GRANTABLE_ACCESS_LEVELS = (
    AccessLevel.MINIMAL,
    AccessLevel.GUEST,
    AccessLevel.REPORTER,
    AccessLevel.DEVELOPER,
    AccessLevel.MAINTAINER,
    AccessLevel.OWNER,
)
