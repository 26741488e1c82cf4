"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across API endpoints.

==============================================================================
"""

from typing import Generic, List, TypeVar
from pydantic import BaseModel, Field


T = TypeVar("T")


class MessageResponse(BaseModel):
    """Simple message response."""
    message: str


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Page/limit sliced list response.

    ``total`` counts every matching item, ``data`` holds only the current page.
    """
    page: int = Field(ge=1)
    limit: int = Field(ge=0)
    total: int = Field(ge=0)
    data: List[T]

    @classmethod
    def create(cls, items: List[T], page: int, limit: int):
        """Slice ``items`` to the requested 1-based page."""
        start = (page - 1) * limit
        return cls(
            page=page,
            limit=limit,
            total=len(items),
            data=items[start:start + limit],
        )
