"""Routes for the product catalog."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.deps import get_product_service
from src.api.schemas import ProductPatchRequest, ProductRequest, ProductResponse
from src.components.products import (
    CreateProductInput,
    DeleteProductInput,
    GetProductInput,
    PatchProductInput,
    ProductOperationOutput,
    ProductPatch,
    ProductService,
    ReplaceProductInput,
    SearchProductsInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_patch,
    run_replace,
    run_search,
)

router = APIRouter()


def _product_or_error(result: ProductOperationOutput) -> ProductResponse:
    if not result.success:
        if result.not_found:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)

    product = result.product
    assert product is not None  # Success guarantees product is not None
    return ProductResponse.from_entity(product)


# --- Routes ---


@router.get(
    "/products",
    response_model=list[ProductResponse],
    operation_id="GetProducts",
)
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """List all products."""
    result = run_list(service)
    return [ProductResponse.from_entity(p) for p in result.products]


# Declared before /products/{product_id} so "search" is not taken as an id.
@router.get(
    "/products/search",
    response_model=list[ProductResponse],
    operation_id="SearchProductsByCategory",
)
def search_products(
    category: str | None = Query(default=None),
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Search products by category."""
    result = run_search(SearchProductsInput(category=category), service)
    return [ProductResponse.from_entity(p) for p in result.products]


@router.get(
    "/products/{product_id}",
    response_model=ProductResponse,
    operation_id="GetProductById",
)
def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Get a product by ID."""
    return _product_or_error(run_get(GetProductInput(product_id=product_id), service))


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="CreateProduct",
)
def create_product(
    data: ProductRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a new product."""
    input_data = CreateProductInput(
        name=data.name,
        description=data.description or "",
        price=data.price,
        category=data.category or "",
        product_id=data.id or "",
    )
    return _product_or_error(run_create(input_data, service))


@router.put(
    "/products/{product_id}",
    response_model=ProductResponse,
    operation_id="UpdateProduct",
)
def replace_product(
    product_id: str,
    data: ProductRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Replace a product. Any id in the body is ignored."""
    input_data = ReplaceProductInput(
        product_id=product_id,
        name=data.name,
        description=data.description or "",
        price=data.price,
        category=data.category or "",
    )
    return _product_or_error(run_replace(input_data, service))


@router.patch(
    "/products/{product_id}",
    response_model=ProductResponse,
    operation_id="PatchProduct",
)
def patch_product(
    product_id: str,
    data: ProductPatchRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Partially update a product."""
    patch = ProductPatch.from_fields(data.model_dump(exclude_unset=True))
    input_data = PatchProductInput(product_id=product_id, patch=patch)
    return _product_or_error(run_patch(input_data, service))


@router.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    operation_id="DeleteProduct",
)
def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> None:
    """Delete a product."""
    result = run_delete(DeleteProductInput(product_id=product_id), service)

    if not result.success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
