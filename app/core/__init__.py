"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException, NotFoundError, ValidationError and handlers
- dependencies: FastAPI dependency injection functions

Usage:
------
    from app.core import NotFoundError, ValidationError
    from app.core import exceptions

    raise exceptions.product_not_found(product_id)

==============================================================================
"""

from .exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
    register_exception_handlers,
)
from .dependencies import get_db, get_product_service

__all__ = [
    # Exceptions
    "AppException",
    "NotFoundError",
    "ValidationError",
    "register_exception_handlers",
    # Dependencies
    "get_db",
    "get_product_service",
]
