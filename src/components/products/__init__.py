"""
Products component - Product catalog management.
"""

from ._impl import (
    ProductService,
    apply_patch,
    matches_category,
    validate_product_data,
)
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_patch,
    run_replace,
    run_search,
)
from .models import (
    UNSET,
    CreateProductInput,
    DeleteProductInput,
    GetProductInput,
    PatchProductInput,
    ProductListOutput,
    ProductOperationOutput,
    ProductPatch,
    ProductValidationError,
    ReplaceProductInput,
    SearchProductsInput,
)
from .ports import IdGeneratorPort, ProductRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_replace",
    "run_patch",
    "run_delete",
    "run_get",
    "run_list",
    "run_search",
    # Input models
    "CreateProductInput",
    "ReplaceProductInput",
    "PatchProductInput",
    "DeleteProductInput",
    "GetProductInput",
    "SearchProductsInput",
    "ProductPatch",
    "UNSET",
    # Output models
    "ProductOperationOutput",
    "ProductListOutput",
    "ProductValidationError",
    # Ports
    "ProductRepoPort",
    "IdGeneratorPort",
    # Core
    "ProductService",
    "apply_patch",
    "matches_category",
    "validate_product_data",
]
