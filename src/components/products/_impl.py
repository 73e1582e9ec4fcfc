"""
ProductService - Product catalog management.

Handles product creation, replacement, partial updates, deletion and
category search over an ordered repository.

Functional Core - pure business logic.

Key behaviors:
- Ids are caller-supplied or generated, and unique within the repository
- Create and replace require a non-empty name
- Patch overwrites only supplied, non-null fields and does not re-validate
  the name (an explicit empty name is accepted)
- Category search is case-insensitive and preserves insertion order
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from src.domain.entities import Product

from .models import NOT_FOUND_CODE, UNSET, ProductPatch, ProductValidationError
from .ports import IdGeneratorPort, ProductRepoPort

logger = logging.getLogger(__name__)

# Attempts before giving up on an id generator that keeps colliding.
MAX_ID_ATTEMPTS = 10


# --- Validation Functions ---


def validate_product_data(name: str | None) -> list[ProductValidationError]:
    """Validate the fields required on create and replace."""
    errors: list[ProductValidationError] = []

    if not name:
        errors.append(
            ProductValidationError(
                code="name_required",
                message="Name is required",
                field="name",
            )
        )

    return errors


def not_found_error(product_id: str) -> ProductValidationError:
    return ProductValidationError(
        code=NOT_FOUND_CODE,
        message=f"Product with ID {product_id} not found",
    )


# --- Patch Merge ---


def apply_patch(existing: Product, patch: ProductPatch) -> Product:
    """
    Merge a patch over an existing product.

    Fields that are UNSET or None in the patch keep their current value;
    any other value (including an empty string or zero price) overwrites.
    The id is never touched.
    """
    updates: dict[str, Any] = {}
    for field_name in ("name", "description", "price", "category"):
        value = getattr(patch, field_name)
        if value is UNSET or value is None:
            continue
        updates[field_name] = value

    return existing.model_copy(update=updates)


def matches_category(product: Product, category: str) -> bool:
    return product.category.casefold() == category.casefold()


# --- Product Service ---


class ProductService:
    """
    Product service.

    Owns no state of its own; all records live in the injected repository.
    """

    def __init__(self, repo: ProductRepoPort, id_generator: IdGeneratorPort) -> None:
        """Initialize service."""
        self._repo = repo
        self._ids = id_generator

    def get_all(self) -> list[Product]:
        """Get all products in insertion order."""
        return self._repo.get_all()

    def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID (exact, case-sensitive)."""
        return self._repo.get_by_id(product_id)

    def search_by_category(self, category: str | None) -> list[Product]:
        """Filter by category; an empty or missing category returns everything."""
        products = self._repo.get_all()
        if not category:
            return products
        return [p for p in products if matches_category(p, category)]

    def create(
        self,
        name: str,
        description: str = "",
        price: Decimal = Decimal("0"),
        category: str = "",
        product_id: str = "",
    ) -> tuple[Product | None, list[ProductValidationError]]:
        """
        Create a new product.

        Returns:
            Tuple of (product, errors). Product is None if validation fails.
        """
        errors = validate_product_data(name)
        if errors:
            logger.debug("Rejected product create: %s", [e.code for e in errors])
            return None, errors

        fields: dict[str, Any] = {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
        }

        if product_id:
            product = Product(id=product_id, **fields)
            if not self._repo.add(product):
                return None, [
                    ProductValidationError(
                        code="id_duplicate",
                        message=f"Product with ID '{product_id}' already exists",
                        field="id",
                    )
                ]
            logger.info("Created product %s", product.id)
            return product, []

        for _ in range(MAX_ID_ATTEMPTS):
            product = Product(id=self._ids.new_id(), **fields)
            if product.id and self._repo.add(product):
                logger.info("Created product %s", product.id)
                return product, []

        raise RuntimeError("Id generator did not produce an unused id")

    def replace(
        self,
        product_id: str,
        name: str,
        description: str = "",
        price: Decimal = Decimal("0"),
        category: str = "",
    ) -> tuple[Product | None, list[ProductValidationError]]:
        """Overwrite name, description, price and category of a product."""
        if self._repo.get_by_id(product_id) is None:
            return None, [not_found_error(product_id)]

        errors = validate_product_data(name)
        if errors:
            return None, errors

        updates: dict[str, Any] = {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
        }
        product = self._repo.update(
            product_id, lambda existing: existing.model_copy(update=updates)
        )
        if product is None:
            return None, [not_found_error(product_id)]

        logger.info("Replaced product %s", product_id)
        return product, []

    def patch(
        self, product_id: str, patch: ProductPatch
    ) -> tuple[Product | None, list[ProductValidationError]]:
        """Apply a partial update."""
        product = self._repo.update(
            product_id, lambda existing: apply_patch(existing, patch)
        )
        if product is None:
            return None, [not_found_error(product_id)]

        logger.info("Patched product %s", product_id)
        return product, []

    def delete(self, product_id: str) -> bool:
        """Delete a product. Returns False if it did not exist."""
        deleted = self._repo.delete(product_id)
        if deleted:
            logger.info("Deleted product %s", product_id)
        return deleted
