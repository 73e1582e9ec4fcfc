"""
Products component - Data models.

Catalog entries are stored as ``Product`` entities; this module holds the
component's input/output shapes and the patch overlay.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from src.domain.entities import Product

# --- Patch Overlay ---


class _Unset:
    """Marker for a patch field that was not supplied."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()


@dataclass(frozen=True)
class ProductPatch:
    """
    Sparse overlay over a Product.

    Each field is one of three states: ``UNSET`` (not supplied), ``None``
    (supplied as null) or a value. Only values overwrite.
    """

    name: str | None | _Unset = UNSET
    description: str | None | _Unset = UNSET
    price: Decimal | None | _Unset = UNSET
    category: str | None | _Unset = UNSET

    @classmethod
    def from_fields(cls, fields: dict[str, object]) -> ProductPatch:
        """Build a patch from only the fields that were supplied."""
        known = {"name", "description", "price", "category"}
        return cls(**{k: v for k, v in fields.items() if k in known})  # type: ignore[arg-type]


# --- Validation Errors ---


@dataclass(frozen=True)
class ProductValidationError:
    """Product operation error."""

    code: str
    message: str
    field: str | None = None


NOT_FOUND_CODE = "product_not_found"


# --- Input Models ---


@dataclass(frozen=True)
class CreateProductInput:
    """Input for creating a product. An empty id asks for a generated one."""

    name: str
    description: str = ""
    price: Decimal = Decimal("0")
    category: str = ""
    product_id: str = ""


@dataclass(frozen=True)
class ReplaceProductInput:
    """Input for replacing every mutable field of a product."""

    product_id: str
    name: str
    description: str = ""
    price: Decimal = Decimal("0")
    category: str = ""


@dataclass(frozen=True)
class PatchProductInput:
    """Input for a partial update."""

    product_id: str
    patch: ProductPatch


@dataclass(frozen=True)
class GetProductInput:
    product_id: str


@dataclass(frozen=True)
class DeleteProductInput:
    product_id: str


@dataclass(frozen=True)
class SearchProductsInput:
    """Category filter; ``None`` or empty matches everything."""

    category: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ProductOperationOutput:
    """Output from a single-product operation."""

    product: Product | None
    errors: tuple[ProductValidationError, ...]
    success: bool

    @property
    def not_found(self) -> bool:
        return any(err.code == NOT_FOUND_CODE for err in self.errors)


@dataclass(frozen=True)
class ProductListOutput:
    """Output from list/search operations."""

    products: tuple[Product, ...]
    total: int
