"""Upvote use cases."""

from .toggle_upvote import (
    ToggleUpvoteRequest,
    ToggleUpvoteResponse,
    ToggleUpvoteUseCase,
)

__all__ = [
    "ToggleUpvoteRequest",
    "ToggleUpvoteResponse",
    "ToggleUpvoteUseCase",
]
