"""Pagination value objects."""

import math

from pydantic import Field

from newsboard.domain.value.common import ValueObject
from newsboard.domain.value.types import SortBy, SortOrder


class PageRequest(ValueObject):
    """Page, size and ordering of a listing."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    sort_by: SortBy = SortBy.POINTS
    order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, count: int) -> int:
        """Number of pages needed for ``count`` rows at this page size."""
        return math.ceil(count / self.limit)


class Page(ValueObject):
    """Position of a returned page within the whole listing."""

    page: int
    total_pages: int
