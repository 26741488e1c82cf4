"""
==============================================================================
Product Service Tests
==============================================================================

Tests for ProductService storage operations.

==============================================================================
"""

from typing import List

from app.db.models import Product
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.product_service import ProductService


class TestProductServiceReads:

    def test_get_all_in_insertion_order(self, service: ProductService, products: List[Product]):
        names = [p.name for p in service.get_all_products()]
        assert names == ["Wireless Mouse", "Fluent Python", "Mouse Pad"]

    def test_get_by_id(self, service: ProductService, products: List[Product]):
        product = service.get_product_by_id(products[0].id)
        assert product is not None
        assert product.name == "Wireless Mouse"

    def test_get_by_unknown_id_returns_none(self, service: ProductService, products: List[Product]):
        assert service.get_product_by_id("missing") is None

    def test_count(self, service: ProductService, products: List[Product]):
        assert service.count_products() == 3


class TestProductServiceWrites:

    def test_create_assigns_uuid(self, service: ProductService):
        product = service.create_product(ProductCreate(
            name="Ceramic Mug", description="350ml", price=9.5, category="Home"
        ))
        assert len(product.id) == 36
        assert product.in_stock is True
        assert service.count_products() == 1

    def test_create_reads_camel_case_stock_flag(self, service: ProductService):
        data = ProductCreate.model_validate({
            "name": "Lamp", "description": "LED", "price": 30, "category": "Home", "inStock": False
        })
        assert service.create_product(data).in_stock is False

    def test_update_only_sent_fields(self, service: ProductService, products: List[Product]):
        update = ProductUpdate.model_validate({"category": "Peripherals", "price": None})
        product = service.update_product(products[0].id, update)
        assert product.category == "Peripherals"
        assert product.price == 24.99
        assert product.description == "2.4GHz mouse"

    def test_update_ignores_blank_strings(self, service: ProductService, products: List[Product]):
        update = ProductUpdate.model_validate({"name": "  ", "description": "Quiet clicks"})
        product = service.update_product(products[0].id, update)
        assert product.name == "Wireless Mouse"
        assert product.description == "Quiet clicks"

    def test_update_unknown_returns_none(self, service: ProductService):
        assert service.update_product("missing", ProductUpdate(name="x")) is None

    def test_delete_returns_removed_product(self, service: ProductService, products: List[Product]):
        target_id = products[1].id
        deleted = service.delete_product(target_id)
        assert deleted.name == "Fluent Python"
        assert service.get_product_by_id(target_id) is None
        assert service.count_products() == 2

    def test_delete_unknown_returns_none(self, service: ProductService):
        assert service.delete_product("missing") is None
