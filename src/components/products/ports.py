"""
Products component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from src.domain.entities import Product


class ProductRepoPort(Protocol):
    """Ordered product storage. Each call is atomic."""

    def get_all(self) -> list[Product]:
        """List all products in insertion order."""
        ...

    def get_by_id(self, product_id: str) -> Product | None:
        """Get product by exact id."""
        ...

    def add(self, product: Product) -> bool:
        """Append product. Returns False if its id is already stored."""
        ...

    def update(
        self, product_id: str, mutator: Callable[[Product], Product]
    ) -> Product | None:
        """Replace product with ``mutator(existing)``. None if missing."""
        ...

    def delete(self, product_id: str) -> bool:
        """Delete product. Returns False if missing."""
        ...


class IdGeneratorPort(Protocol):
    """Source of fresh product ids."""

    def new_id(self) -> str:
        ...
