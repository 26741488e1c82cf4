"""
==============================================================================
API v1 Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- products: Product catalog CRUD and queries

==============================================================================
"""

from . import health, products

__all__ = ["health", "products"]
