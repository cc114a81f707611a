"""FastAPI dependencies for dependency injection.

Provides:
- Product registry instance
- Caller identity from request headers
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from product_registry.infra.logging import get_logger
from product_registry.services.registry import ProductRegistry

logger = get_logger(__name__)


def get_registry(request: Request) -> ProductRegistry:
    """Registry created by the application lifespan."""
    return request.app.state.registry


def get_caller(
    x_caller: Annotated[str | None, Header(alias="X-Caller")] = None,
) -> str:
    """Extract the caller identity from the ``X-Caller`` header.

    Every mutating call is executed on behalf of this identity.

    Raises:
        HTTPException: 401 if the header is missing or empty
    """
    if not x_caller:
        logger.warning("Rejected request: missing X-Caller header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing required X-Caller header",
        )
    return x_caller


# Type aliases for cleaner annotations
Registry = Annotated[ProductRegistry, Depends(get_registry)]
Caller = Annotated[str, Depends(get_caller)]
