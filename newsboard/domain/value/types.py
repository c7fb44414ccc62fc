"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from newsboard.domain.value.common import RootValueObject


class UpvoteTarget(str, Enum):
    """Kind of entity that can be upvoted."""

    POST = "post"
    COMMENT = "comment"


class SortBy(str, Enum):
    """Sort key for post and comment listings."""

    POINTS = "points"
    RECENT = "recent"  # created_at


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class Username(RootValueObject[str]):
    """Unique user name.

    3-31 characters, letters, digits and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not re.fullmatch(r"[a-zA-Z0-9_]{3,31}", v):
            raise ValueError(
                "Username must be 3-31 characters of letters, digits or underscores"
            )
        return v
