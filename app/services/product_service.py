"""
==============================================================================
Product Service Module
==============================================================================

Storage service for the product catalog.

This module implements:
- ProductService: CRUD operations over the products table

Lookups, updates and deletes for an unknown id return None. Deciding what
a miss means (404 for the HTTP layer) is left to the caller.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.db.models import Product
from app.schemas.product import ProductCreate, ProductUpdate


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product storage service.

    Attributes:
        _db: Database session

    Example:
        >>> service = ProductService(db_session)
        >>> product = service.create_product(ProductCreate(
        ...     name="Desk Lamp",
        ...     description="LED lamp",
        ...     price=24.5,
        ...     category="Home",
        ... ))
        >>> service.get_product_by_id(product.id)
        <Product(id='...', name='Desk Lamp', category='Home')>
    """

    def __init__(self, db: Session) -> None:
        """
        Initialize the product service.

        Args:
            db: SQLAlchemy database session
        """
        self._db = db

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def get_all_products(self) -> List[Product]:
        """Return every product in insertion order."""
        return (
            self._db.query(Product)
            .order_by(Product.pk)
            .all()
        )

    def get_product_by_id(self, product_id: str) -> Optional[Product]:
        """Return the product with ``product_id`` or None."""
        product = self._db.query(Product).filter(Product.id == product_id).first()
        if product is None:
            logger.debug(f"Product lookup miss: {product_id}")
        return product

    def count_products(self) -> int:
        """Number of products in the catalog."""
        return self._db.query(Product).count()

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def create_product(self, data: ProductCreate) -> Product:
        """
        Create a new product.

        Args:
            data: ProductCreate with the required fields already checked

        Returns:
            Created Product model
        """
        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            category=data.category,
            in_stock=True if data.in_stock is None else data.in_stock,
        )

        self._db.add(product)
        self._db.commit()
        self._db.refresh(product)

        logger.info(f"✅ Product created: {product.name} ({product.id})")
        return product

    def update_product(self, product_id: str, data: ProductUpdate) -> Optional[Product]:
        """
        Apply a partial update.

        Returns:
            Updated Product, or None if ``product_id`` is unknown
        """
        product = self.get_product_by_id(product_id)
        if product is None:
            logger.warning(f"Update failed: product not found - {product_id}")
            return None

        changes: Dict[str, object] = data.changes()
        for field, value in changes.items():
            if field in Product.UPDATABLE_FIELDS:
                setattr(product, field, value)

        self._db.commit()
        self._db.refresh(product)

        logger.info(f"Product updated: {product.id} ({', '.join(changes) or 'no changes'})")
        return product

    def delete_product(self, product_id: str) -> Optional[Product]:
        """
        Remove a product.

        Returns:
            The deleted Product, or None if ``product_id`` is unknown
        """
        product = self.get_product_by_id(product_id)
        if product is None:
            logger.warning(f"Delete failed: product not found - {product_id}")
            return None

        self._db.delete(product)
        self._db.commit()

        logger.info(f"🗑️ Product deleted: {product.name} ({product_id})")
        return product
