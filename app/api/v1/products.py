"""
==============================================================================
Product Catalog Endpoints
==============================================================================

CRUD and query endpoints for the product catalog.

Routes:
-------
    GET    /products          list (category, search, page, limit)
    GET    /products/stats    product count per category
    GET    /products/{id}     single product
    POST   /products          create
    PUT    /products/{id}     partial update
    DELETE /products/{id}     delete

Failures are raised as NotFoundError / ValidationError and rendered by the
handlers registered in app.core.exceptions.

==============================================================================
"""

from typing import Dict, List, Optional
from fastapi import APIRouter, Depends, Query, status

from app.core import exceptions
from app.core.dependencies import get_product_service
from app.db.models import Product
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductDetail,
    ProductListResponse,
    ProductDeletedResponse,
)
from app.services.product_service import ProductService
from app.utils.validators import ProductPayloadValidator, parse_positive_int


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, service: ProductService):
        self._service = service
        self._validator = ProductPayloadValidator()

    def list_products(
        self,
        category: Optional[str],
        search: Optional[str],
        page: Optional[str],
        limit: Optional[str]
    ) -> ProductListResponse:
        """Filter by category and name, then slice to the requested page."""
        products = self._service.get_all_products()

        if category:
            wanted = category.lower()
            products = [p for p in products if p.category.lower() == wanted]

        if search:
            term = search.lower()
            products = [p for p in products if term in p.name.lower()]

        page_number = parse_positive_int(page, default=1)
        page_size = parse_positive_int(limit, default=len(products))

        return ProductListResponse.create(
            items=[ProductDetail.model_validate(p) for p in products],
            page=page_number,
            limit=page_size,
        )

    def get(self, product_id: str) -> ProductDetail:
        product = self._service.get_product_by_id(product_id)
        if not product:
            raise exceptions.product_not_found(product_id)
        return ProductDetail.model_validate(product)

    def create(self, data: ProductCreate) -> ProductDetail:
        is_valid, missing = self._validator.validate(data)
        if not is_valid:
            raise exceptions.missing_fields(missing)

        product = self._service.create_product(data)
        return ProductDetail.model_validate(product)

    def update(self, product_id: str, data: ProductUpdate) -> ProductDetail:
        product = self._service.update_product(product_id, data)
        if not product:
            raise exceptions.product_not_found(product_id)
        return ProductDetail.model_validate(product)

    def delete(self, product_id: str) -> ProductDeletedResponse:
        product = self._service.delete_product(product_id)
        if not product:
            raise exceptions.product_not_found(product_id)
        return ProductDeletedResponse(
            message="Product deleted successfully",
            product=ProductDetail.model_validate(product),
        )

    def get_stats(self) -> Dict[str, int]:
        """Count products per category."""
        return self.count_by_category(self._service.get_all_products())

    @staticmethod
    def count_by_category(products: List[Product]) -> Dict[str, int]:
        stats: Dict[str, int] = {}
        for product in products:
            stats[product.category] = stats.get(product.category, 0) + 1
        return stats


@router.get("", response_model=ProductListResponse)
async def list_products(
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    page: Optional[str] = Query(None, description="1-based page number"),
    limit: Optional[str] = Query(None, description="Page size (default: all results)"),
    service: ProductService = Depends(get_product_service)
):
    """List products with optional category filter, name search and pagination."""
    controller = ProductController(service)
    return controller.list_products(category, search, page, limit)


@router.get("/stats", response_model=Dict[str, int])
async def get_product_stats(service: ProductService = Depends(get_product_service)):
    """Get the number of products in each category."""
    controller = ProductController(service)
    return controller.get_stats()


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    """Get product by ID."""
    controller = ProductController(service)
    return controller.get(product_id)


@router.post("", response_model=ProductDetail, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: Optional[ProductCreate] = None,
    service: ProductService = Depends(get_product_service)
):
    """Create a product. name, description, price and category are required."""
    controller = ProductController(service)
    return controller.create(request or ProductCreate())


@router.put("/{product_id}", response_model=ProductDetail)
async def update_product(
    product_id: str,
    request: Optional[ProductUpdate] = None,
    service: ProductService = Depends(get_product_service)
):
    """Update the fields present in the body."""
    controller = ProductController(service)
    return controller.update(product_id, request or ProductUpdate())


@router.delete("/{product_id}", response_model=ProductDeletedResponse)
async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    """Delete product and return it."""
    controller = ProductController(service)
    return controller.delete(product_id)
