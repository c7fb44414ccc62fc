"""Caller identity.

Every request resolves to exactly one of ``Authenticated`` or ``Anonymous``.
"""

from typing import Literal, Union

from newsboard.domain.error import UnauthorizedError
from newsboard.domain.model.common import DomainModel
from newsboard.domain.model.session import Session
from newsboard.domain.model.user import User
from newsboard.domain.value import UserId


class Authenticated(DomainModel):
    """Caller with a valid session."""

    kind: Literal["authenticated"] = "authenticated"
    user: User
    session: Session


class Anonymous(DomainModel):
    """Caller without a (valid) session."""

    kind: Literal["anonymous"] = "anonymous"


Identity = Union[Authenticated, Anonymous]


def require_user(identity: Identity) -> User:
    """Return the caller's user or raise UnauthorizedError."""
    if isinstance(identity, Authenticated):
        return identity.user
    raise UnauthorizedError()


def viewer_id(identity: Identity) -> UserId | None:
    """User id to annotate listings with, None for anonymous callers."""
    if isinstance(identity, Authenticated):
        return identity.user.id
    return None
