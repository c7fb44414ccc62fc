"""Session entity.

A session ties an opaque cookie token to a user until it expires.
"""

from datetime import datetime

from newsboard.domain.model.common import DomainModel
from newsboard.domain.value import SessionId, UserId


class Session(DomainModel):
    """Server-side login session."""

    id: SessionId
    user_id: UserId
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
