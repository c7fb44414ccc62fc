"""Response envelopes shared by all routes."""

from typing import Generic, Literal, TypeVar

from newsboard.application.usecase.base import PageInfo, ResponseModel

DataT = TypeVar("DataT")


class SuccessResponse(ResponseModel, Generic[DataT]):
    """Successful response carrying data."""

    success: Literal[True] = True
    message: str
    data: DataT


class PaginatedResponse(ResponseModel, Generic[DataT]):
    """Successful response carrying one page of a listing."""

    success: Literal[True] = True
    message: str
    data: DataT
    pagination: PageInfo


class MessageResponse(ResponseModel):
    """Successful response without data."""

    success: Literal[True] = True
    message: str
