"""Unit tests for pagination value objects."""

import pytest
from pydantic import ValidationError

from newsboard.domain.value import PageRequest, SortBy, SortOrder, Username


class TestPageRequest:
    def test_defaults(self):
        page = PageRequest()

        assert page.page == 1
        assert page.limit == 10
        assert page.sort_by == SortBy.POINTS
        assert page.order == SortOrder.DESC
        assert page.offset == 0

    def test_offset(self):
        assert PageRequest(page=3, limit=20).offset == 40

    @pytest.mark.parametrize(
        "count, expected", [(0, 0), (1, 1), (10, 1), (11, 2), (100, 10)]
    )
    def test_total_pages(self, count, expected):
        assert PageRequest(limit=10).total_pages(count) == expected

    @pytest.mark.parametrize("kwargs", [{"page": 0}, {"limit": 0}])
    def test_rejects_non_positive_values(self, kwargs):
        with pytest.raises(ValidationError):
            PageRequest(**kwargs)


class TestUsername:
    @pytest.mark.parametrize("value", ["abc", "user_name_1", "A" * 31])
    def test_valid(self, value):
        assert Username(value).root == value

    @pytest.mark.parametrize(
        "value", ["ab", "A" * 32, "has space", "dash-ed", "alice\n"]
    )
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            Username(value)
