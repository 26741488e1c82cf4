"""
==============================================================================
Database Initialization Tests
==============================================================================

Tests for catalog seeding from the grouped JSON file.

==============================================================================
"""

import json
from pathlib import Path

import pytest
from sqlalchemy.orm import Session

from app.db.init_db import DatabaseInitializer
from app.db.models import Product


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    path = tmp_path / "products.json"
    path.write_text(json.dumps({
        "Electronics": [
            {"name": "Mouse", "description": "USB mouse", "price": 20, "inStock": True},
            {"name": "No price", "description": "skipped"},
        ],
        "Books": [
            {"name": "Fluent Python", "price": 55.5, "inStock": False},
        ],
        "Broken": "not a list",
    }), encoding="utf-8")
    return path


class TestSeedProducts:

    def test_loads_valid_entries(self, db: Session, seed_file: Path):
        initializer = DatabaseInitializer(session=db)
        assert initializer.seed_products(seed_file) == 2

        products = db.query(Product).order_by(Product.pk).all()
        assert [(p.name, p.category) for p in products] == [
            ("Mouse", "Electronics"),
            ("Fluent Python", "Books"),
        ]
        assert products[1].description == ""
        assert products[1].in_stock is False

    def test_skips_populated_catalog(self, db: Session, seed_file: Path):
        initializer = DatabaseInitializer(session=db)
        initializer.seed_products(seed_file)
        assert initializer.seed_products(seed_file) == 0
        assert db.query(Product).count() == 2

    def test_missing_file(self, db: Session, tmp_path: Path):
        initializer = DatabaseInitializer(session=db)
        assert initializer.seed_products(tmp_path / "absent.json") == 0

    def test_invalid_json_raises(self, db: Session, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            DatabaseInitializer(session=db).seed_products(path)

    def test_bundled_seed_file_parses(self):
        path = Path(__file__).resolve().parent.parent / "data" / "products.json"
        products = DatabaseInitializer.load_seed_file(path)
        assert len(products) == 7
        assert {p.category for p in products} == {"Electronics", "Books", "Home"}


VALID_ENTRY = {"name": "Ceramic Mug", "description": "350ml", "price": 9.5}


class TestSeedMalformedEntries:
    """A bad entry is skipped; the rest of the file still loads."""

    @pytest.mark.parametrize("bad_entry", [
        {"price": "cheap"},
        {"name": "Lamp", "price": "cheap"},
        {"name": "Lamp", "price": True},
        {"name": "Lamp", "description": None, "price": 30},
        {"name": None, "price": 30},
        {"name": "   ", "price": 30},
        "not an object",
    ])
    def test_bad_entry_is_skipped(self, db: Session, tmp_path: Path, bad_entry):
        path = tmp_path / "products.json"
        path.write_text(json.dumps({"Home": [VALID_ENTRY, bad_entry]}), encoding="utf-8")

        assert DatabaseInitializer(session=db).seed_products(path) == 1
        assert [p.name for p in db.query(Product).all()] == ["Ceramic Mug"]

    def test_numeric_string_price_is_accepted(self, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps({"Home": [{"name": "Mug", "price": "12.5"}]}), encoding="utf-8")
        products = DatabaseInitializer.load_seed_file(path)
        assert products[0].price == 12.5

    def test_top_level_list_loads_nothing(self, db: Session, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([VALID_ENTRY]), encoding="utf-8")
        assert DatabaseInitializer(session=db).seed_products(path) == 0
        assert db.query(Product).count() == 0


class TestInitialize:

    def test_seeding_disabled_reports_zero(self, db: Session):
        # conftest sets SEED_ON_STARTUP=false
        assert DatabaseInitializer(session=db).initialize() == 0
        assert db.query(Product).count() == 0
