"""
==============================================================================
Validation Utilities Module
==============================================================================

Input checks applied by the product endpoints.

This module implements:
- ProductPayloadValidator: required-field check for product creation
- parse_positive_int: lenient page/limit query parsing

Required Fields for Creation:
----------------------------
- name, description, category: present and non-empty
- price: present and not null (0 is a valid price)

==============================================================================
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from app.schemas.product import ProductCreate


class ProductPayloadValidator:
    """
    Validator for product creation payloads.

    Example:
        >>> validator = ProductPayloadValidator()
        >>> is_valid, missing = validator.validate(ProductCreate(name="Mug"))
        >>> print(missing)
        ['description', 'price', 'category']
    """

    TEXT_FIELDS = ("name", "description", "category")
    REQUIRED_FIELDS = ("name", "description", "price", "category")

    def validate(self, data: ProductCreate) -> Tuple[bool, List[str]]:
        """
        Check that every required field is present.

        Args:
            data: Parsed creation payload

        Returns:
            Tuple of (is_valid, missing_fields) with missing_fields in
            declaration order
        """
        missing = [
            field for field in self.REQUIRED_FIELDS
            if self._is_missing(field, getattr(data, field))
        ]
        return not missing, missing

    def _is_missing(self, field: str, value: object) -> bool:
        if value is None:
            return True
        if field in self.TEXT_FIELDS:
            return value == ""
        return False


# Leading optional sign and digits, e.g. "2", "  3", "10abc"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_positive_int(value: Optional[str], default: int) -> int:
    """
    Parse a page/limit query value.

    The leading integer of ``value`` is used ("10abc" -> 10). Missing,
    non-numeric, zero and negative values yield ``default``.
    """
    if value is None:
        return default

    match = _LEADING_INT.match(value)
    if not match:
        return default

    number = int(match.group(1))
    return number if number >= 1 else default
