"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test database, client and product fixtures.

==============================================================================
"""

import os

# Keep app startup off the real database and seed file
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from typing import Dict, Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.database import Base
from app.db.models import Product
from app.core.dependencies import get_db
from app.services.product_service import ProductService


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

# In-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def service(db: Session) -> ProductService:
    """ProductService bound to the test session."""
    return ProductService(db)


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

PRODUCT_ROWS = [
    {"name": "Wireless Mouse", "description": "2.4GHz mouse", "price": 24.99, "category": "Electronics", "in_stock": True},
    {"name": "Fluent Python", "description": "Python book", "price": 54.99, "category": "Books", "in_stock": True},
    {"name": "Mouse Pad", "description": "Cloth pad", "price": 7.5, "category": "electronics", "in_stock": False},
]


@pytest.fixture
def products(db: Session) -> List[Product]:
    """Three products; two share the Electronics category modulo case."""
    rows = [Product(**row) for row in PRODUCT_ROWS]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows


@pytest.fixture
def product_payload() -> Dict[str, object]:
    """Valid creation body."""
    return {
        "name": "Desk Lamp",
        "description": "Dimmable LED lamp",
        "price": 32.0,
        "category": "Home",
        "inStock": False,
    }
