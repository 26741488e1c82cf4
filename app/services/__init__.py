"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes sitting between the API endpoints and the database.

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Storage operations
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   Repository    │  ← Data Access (via ORM)
    └─────────────────┘

Usage:
------
    from app.services import ProductService

    service = ProductService(db_session)
    products = service.get_all_products()

==============================================================================
"""

from .product_service import ProductService

__all__ = [
    "ProductService",
]
