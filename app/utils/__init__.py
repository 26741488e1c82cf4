"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Product payload validation and query parsing

==============================================================================
"""

from .validators import ProductPayloadValidator, parse_positive_int

__all__ = [
    "ProductPayloadValidator",
    "parse_positive_int",
]
