"""
Products component - Product catalog CRUD and category search.

Shell Layer - converts service results into component outputs.
"""

from __future__ import annotations

from ._impl import ProductService, not_found_error
from .models import (
    CreateProductInput,
    DeleteProductInput,
    GetProductInput,
    PatchProductInput,
    ProductListOutput,
    ProductOperationOutput,
    ReplaceProductInput,
    SearchProductsInput,
)

# --- Shell Layer Functions ---


def run_create(
    input_data: CreateProductInput,
    service: ProductService,
) -> ProductOperationOutput:
    """Create a new product."""
    product, errors = service.create(
        name=input_data.name,
        description=input_data.description,
        price=input_data.price,
        category=input_data.category,
        product_id=input_data.product_id,
    )

    return ProductOperationOutput(
        product=product,
        errors=tuple(errors),
        success=product is not None,
    )


def run_replace(
    input_data: ReplaceProductInput,
    service: ProductService,
) -> ProductOperationOutput:
    """Replace all mutable fields of an existing product."""
    product, errors = service.replace(
        input_data.product_id,
        name=input_data.name,
        description=input_data.description,
        price=input_data.price,
        category=input_data.category,
    )

    return ProductOperationOutput(
        product=product,
        errors=tuple(errors),
        success=product is not None,
    )


def run_patch(
    input_data: PatchProductInput,
    service: ProductService,
) -> ProductOperationOutput:
    """Partially update an existing product."""
    product, errors = service.patch(input_data.product_id, input_data.patch)

    return ProductOperationOutput(
        product=product,
        errors=tuple(errors),
        success=product is not None,
    )


def run_delete(
    input_data: DeleteProductInput,
    service: ProductService,
) -> ProductOperationOutput:
    """Delete a product."""
    if service.delete(input_data.product_id):
        return ProductOperationOutput(product=None, errors=(), success=True)

    return ProductOperationOutput(
        product=None,
        errors=(not_found_error(input_data.product_id),),
        success=False,
    )


def run_get(
    input_data: GetProductInput,
    service: ProductService,
) -> ProductOperationOutput:
    """Get a product by ID."""
    product = service.get_by_id(input_data.product_id)

    if product is None:
        return ProductOperationOutput(
            product=None,
            errors=(not_found_error(input_data.product_id),),
            success=False,
        )

    return ProductOperationOutput(product=product, errors=(), success=True)


def run_list(service: ProductService) -> ProductListOutput:
    """List all products."""
    products = service.get_all()
    return ProductListOutput(products=tuple(products), total=len(products))


def run_search(
    input_data: SearchProductsInput,
    service: ProductService,
) -> ProductListOutput:
    """Search products by category."""
    products = service.search_by_category(input_data.category)
    return ProductListOutput(products=tuple(products), total=len(products))
