"""Shared path parameters."""

from typing import Annotated

from fastapi import Path

from newsboard.domain.value.identifiers import MAX_ROW_ID

PostIdPath = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]
CommentIdPath = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]
