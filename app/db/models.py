"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM model for the product catalog.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                           products                              │
    ├─────────────────────────────────────────────────────────────────┤
    │ pk (INTEGER, PK, AUTO INCREMENT)                                │
    │ id (UUID, UNIQUE, NOT NULL)                                     │
    │ name (VARCHAR, NOT NULL, INDEX)                                 │
    │ description (TEXT, NOT NULL)                                    │
    │ price (FLOAT, NOT NULL)                                         │
    │ category (VARCHAR, NOT NULL, INDEX)                             │
    │ in_stock (BOOLEAN, DEFAULT true)                                │
    │ created_at (DATETIME, DEFAULT now)                              │
    │ updated_at (DATETIME, AUTO UPDATE)                              │
    └─────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, Text

from app.db.database import Base


def generate_uuid() -> str:
    """Generate a new UUID string for public product ids."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """
    Product catalog item.

    The JSON representation (see app.schemas.product.ProductDetail) exposes
    in_stock as ``inStock`` and leaves the timestamps out.
    """

    __tablename__ = "products"

    # Surrogate key; also fixes insertion order
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False, default=generate_uuid)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    in_stock = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Fields a partial update may change
    UPDATABLE_FIELDS = ("name", "description", "price", "category", "in_stock")

    def __repr__(self) -> str:
        return f"<Product(id={self.id!r}, name={self.name!r}, category={self.category!r})>"
