"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for product catalog operations.

Request bodies are deliberately permissive: every field is optional at the
schema level and the required-field rule for creation is applied by
ProductPayloadValidator, so a missing field surfaces as ValidationError
("All fields are required") rather than a generic schema error.

The stock flag travels as ``inStock`` on the wire; ``in_stock`` is also
accepted in request bodies.

==============================================================================
"""

from typing import Dict, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import MessageResponse, PaginatedResponse


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class ProductCreate(BaseModel):
    """Product creation request."""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("inStock", "in_stock"),
    )

    @field_validator("name", "description", "category")
    @classmethod
    def strip_whitespace(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v is not None else None


class ProductUpdate(ProductCreate):
    """
    Partial product update.

    Only fields present in the body are applied; explicit nulls and blank
    strings are ignored.
    """

    def changes(self) -> Dict[str, object]:
        """Fields sent by the client, keyed by ORM attribute name."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None and value != ""
        }


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class ProductDetail(BaseModel):
    """Product as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    price: float
    category: str
    in_stock: bool = Field(
        validation_alias=AliasChoices("in_stock", "inStock"),
        serialization_alias="inStock",
    )


ProductListResponse = PaginatedResponse[ProductDetail]


class ProductDeletedResponse(MessageResponse):
    """Delete confirmation carrying the removed product."""
    product: ProductDetail
