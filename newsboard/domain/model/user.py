"""User aggregate root."""

from pydantic import Field

from newsboard.domain.model.common import DomainModel
from newsboard.domain.value import UserId


class User(DomainModel):
    """Registered user.

    Created at signup and immutable afterwards.
    """

    id: UserId
    username: str = Field(min_length=1, max_length=31)
    password_hash: str = Field(repr=False)


class Author(DomainModel):
    """Public view of a user attached to posts and comments."""

    id: UserId
    username: str
