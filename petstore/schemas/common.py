from __future__ import annotations

from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field


class OrderStatus(StrEnum):
    PLACED = "placed"
    APPROVED = "approved"
    DELIVERED = "delivered"


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope returned by every store delegate operation.

    ``body=None`` means the HTTP response carries no content.
    """

    status_code: int = Field(200, ge=100, le=599)
    body: T | None = None
    headers: dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    detail: str
    error_code: str | None = None
