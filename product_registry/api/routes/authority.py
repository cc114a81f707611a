"""Registry configuration endpoints: authority binding and creation fee."""

from fastapi import APIRouter

from product_registry.api.deps import Caller, Registry
from product_registry.infra.logging import get_logger
from product_registry.schemas.common import OperationResult
from product_registry.schemas.product import (
    AuthorityRequest,
    AuthorityVerifiedResponse,
    FeeRequest,
)

router = APIRouter()
logger = get_logger(__name__)


@router.post("/authority", response_model=OperationResult[bool])
async def set_authority_contract(
    request: AuthorityRequest,
    registry: Registry,
    caller: Caller,
) -> OperationResult[bool]:
    """Bind the fee-receiving authority. Succeeds only once."""
    logger.info("Set authority request received", identity=request.identity, caller=caller)
    bound = registry.set_authority_contract(request.identity).unwrap()
    return OperationResult[bool](success=True, data=bound)


@router.put("/fee", response_model=OperationResult[bool])
async def set_creation_fee(
    request: FeeRequest,
    registry: Registry,
    caller: Caller,
) -> OperationResult[bool]:
    logger.info("Set creation fee request received", amount=request.amount, caller=caller)
    changed = registry.set_creation_fee(request.amount).unwrap()
    return OperationResult[bool](success=True, data=changed)


@router.get("/authority/{identity}/verified", response_model=AuthorityVerifiedResponse)
async def is_verified_authority(identity: str, registry: Registry) -> AuthorityVerifiedResponse:
    verified = registry.is_verified_authority(identity).unwrap()
    return AuthorityVerifiedResponse(identity=identity, verified=verified)
