"""
==============================================================================
Database Initialization Module
==============================================================================

Database setup for the product catalog.

This module implements:
- DatabaseInitializer: table creation and catalog seeding
- init_db(): startup entry point used by app.main

Initialization Flow:
-------------------
1. Create all tables from ORM models
2. If seeding is enabled and the products table is empty, load the
   seed JSON file

Seed File Structure:
-------------------
{
  "Electronics": [
    {"name": "...", "description": "...", "price": 19.99, "inStock": true},
    ...
  ],
  "Books": [...]
}

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from sqlalchemy.orm import Session

from app.config import get_settings
from app.db.database import DatabaseManager, get_database_manager
from app.db.models import Product


# Module logger
logger = logging.getLogger(__name__)


class DatabaseInitializer:
    """
    Database initialization manager.

    Example:
        >>> initializer = DatabaseInitializer()
        >>> initializer.initialize()
        >>>
        >>> # Or individual operations
        >>> initializer.create_tables()
        >>> initializer.seed_products(Path("data/products.json"))
    """

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        session: Optional[Session] = None
    ) -> None:
        """
        Args:
            db_manager: Optional DatabaseManager (uses the global one if None)
            session: Optional existing session (a new one per call if None)
        """
        self._db_manager = db_manager or get_database_manager()
        self._settings = get_settings()
        self._session = session

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    def create_tables(self) -> None:
        """Create all database tables from ORM models."""
        logger.info("Creating database tables...")
        self._db_manager.create_tables()
        logger.info("✅ Database tables created successfully")

    # =========================================================================
    # SEEDING
    # =========================================================================

    @staticmethod
    def load_seed_file(products_file: Path) -> List[Product]:
        """
        Parse the category-grouped seed file into Product models.

        Malformed categories and entries are skipped with a warning.

        Raises:
            FileNotFoundError: If the file does not exist
            json.JSONDecodeError: If the file is not valid JSON
        """
        with products_file.open("r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            logger.warning(f"Seed file {products_file} is not a category mapping, nothing loaded")
            return []

        products: List[Product] = []
        for category, items in data.items():
            if not category.strip() or not isinstance(items, list):
                logger.warning(f"Skipping invalid category: {category!r}")
                continue

            for item in items:
                product = DatabaseInitializer._parse_seed_item(category, item)
                if product is None:
                    logger.warning(f"Skipping invalid product in {category}: {item!r}")
                    continue
                products.append(product)

        return products

    @staticmethod
    def _parse_seed_item(category: str, item: object) -> Optional[Product]:
        """Build a Product from one seed entry, or None if it is malformed."""
        if not isinstance(item, dict):
            return None

        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            return None

        description = item.get("description", "")
        if not isinstance(description, str):
            return None

        price = item.get("price")
        if isinstance(price, bool):
            return None
        try:
            price = float(price)
        except (TypeError, ValueError):
            return None

        return Product(
            name=name.strip(),
            description=description.strip(),
            price=price,
            category=category,
            in_stock=bool(item.get("inStock", True)),
        )

    def seed_products(self, products_file: Path) -> int:
        """
        Load the seed file into an empty products table.

        Returns:
            Number of products inserted (0 if the table already had rows
            or the file is missing)
        """
        if not products_file.exists():
            logger.warning(f"⚠️ Products file not found: {products_file}")
            return 0

        session = self._session or self._db_manager.get_session()
        try:
            if session.query(Product).count() > 0:
                logger.info("Catalog already populated, skipping seed")
                return 0

            products = self.load_seed_file(products_file)
            session.add_all(products)
            session.commit()

            logger.info(f"✅ Seeded {len(products)} products from {products_file}")
            return len(products)

        except Exception:
            session.rollback()
            raise
        finally:
            if self._session is None:
                session.close()

    def initialize(self) -> int:
        """
        Create tables and, if enabled, seed the catalog.

        Returns:
            Number of products seeded
        """
        self.create_tables()
        if not self._settings.seed_on_startup:
            logger.info("Catalog seeding disabled")
            return 0
        return self.seed_products(self._settings.products_path)


def init_db() -> int:
    """Initialize the database (tables + optional seed)."""
    return DatabaseInitializer().initialize()
