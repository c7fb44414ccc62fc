"""Listing order shared by post and comment queries."""

from typing import List

from sqlalchemy import Table
from sqlalchemy.sql.elements import ColumnElement

from newsboard.domain.value import PageRequest, SortBy, SortOrder


def order_clauses(table: Table, page: PageRequest) -> List[ColumnElement]:
    """ORDER BY clauses for a page request.

    Ties are broken on id in the same direction so pages never overlap.
    """
    column = (
        table.c.points if page.sort_by == SortBy.POINTS else table.c.created_at
    )
    if page.order == SortOrder.ASC:
        return [column.asc(), table.c.id.asc()]
    return [column.desc(), table.c.id.desc()]
