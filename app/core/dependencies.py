"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection helpers shared by the API endpoints.

Dependency Chain:
----------------
    get_db()  ->  get_product_service()  ->  ProductController

Tests override get_db (see tests/conftest.py) to point every request at
an in-memory database.

==============================================================================
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.database import get_database_manager
from app.services.product_service import ProductService


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a database session.

    Yields a SQLAlchemy session and ensures it's closed after the request.
    """
    db = get_database_manager().get_session()
    try:
        yield db
    finally:
        db.close()


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """FastAPI dependency returning a ProductService bound to the request session."""
    return ProductService(db)
