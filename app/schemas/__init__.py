"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

- Common: Shared response schemas
- Product: Product CRUD schemas

==============================================================================
"""

from .common import MessageResponse, PaginatedResponse
from .product import (
    ProductCreate,
    ProductUpdate,
    ProductDetail,
    ProductListResponse,
    ProductDeletedResponse,
)

__all__ = [
    # Common
    "MessageResponse",
    "PaginatedResponse",
    # Product
    "ProductCreate",
    "ProductUpdate",
    "ProductDetail",
    "ProductListResponse",
    "ProductDeletedResponse",
]
