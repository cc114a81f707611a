"""Product endpoints: create, update and exact lookups."""

from fastapi import APIRouter, Query, status

from product_registry.api.deps import Caller, Registry
from product_registry.core.errors import ErrorCode, RegistryError
from product_registry.infra.logging import get_logger
from product_registry.schemas.product import (
    ProductCountResponse,
    ProductCreatedResponse,
    ProductCreateRequest,
    ProductExistsResponse,
    ProductResponse,
    ProductUpdateRequest,
    ProductUpdateResponse,
)

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a product and pay the creation fee",
)
async def create_product(
    request: ProductCreateRequest,
    registry: Registry,
    caller: Caller,
) -> ProductCreatedResponse:
    logger.info("Create product request received", name=request.name, caller=caller)
    product_id = registry.create_product(request.to_draft(), caller=caller).unwrap()
    return ProductCreatedResponse(id=product_id)


@router.get("/count", response_model=ProductCountResponse)
async def get_product_count(registry: Registry) -> ProductCountResponse:
    """Number of products ever created."""
    return ProductCountResponse(count=registry.get_product_count().unwrap())


@router.get("/exists", response_model=ProductExistsResponse)
async def check_product_existence(
    registry: Registry,
    name: str = Query(description="Exact product name"),
) -> ProductExistsResponse:
    exists = registry.check_product_existence(name).unwrap()
    return ProductExistsResponse(name=name, exists=exists)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, registry: Registry) -> ProductResponse:
    product = registry.get_product(product_id)
    if product is None:
        raise RegistryError(ErrorCode.NOT_FOUND, f"Product not found: {product_id}")
    return ProductResponse.from_product(product_id, product)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Edit name, max quantity and description (creator only)",
)
async def update_product(
    product_id: int,
    request: ProductUpdateRequest,
    registry: Registry,
    caller: Caller,
) -> ProductResponse:
    registry.update_product(
        product_id,
        name=request.name,
        max_quantity=request.max_quantity,
        description=request.description,
        caller=caller,
    ).unwrap()

    product = registry.get_product(product_id)
    if product is None:
        raise RegistryError(ErrorCode.NOT_FOUND, f"Product not found: {product_id}")
    return ProductResponse.from_product(product_id, product)


@router.get("/{product_id}/update", response_model=ProductUpdateResponse)
async def get_product_update(product_id: int, registry: Registry) -> ProductUpdateResponse:
    """Latest edit of a product.

    404 when the product does not exist or was never updated.
    """
    update = registry.get_product_update(product_id)
    if update is None:
        raise RegistryError(ErrorCode.NOT_FOUND, f"No update recorded for product: {product_id}")
    return ProductUpdateResponse.from_update(update)
