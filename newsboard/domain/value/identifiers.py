"""Strongly typed identifiers for domain entities.

Users and sessions carry opaque string ids; content rows use the integer
keys assigned by the store.
"""

from typing import NewType

UserId = NewType("UserId", str)
SessionId = NewType("SessionId", str)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
UpvoteId = NewType("UpvoteId", int)

# Content ids are 32-bit serial keys.
MAX_ROW_ID = 2**31 - 1
