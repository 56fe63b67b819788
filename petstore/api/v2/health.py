from __future__ import annotations

from fastapi import APIRouter, Depends

from petstore.api.deps import get_store_delegate
from petstore.core.config import APP_VERSION
from petstore.delegates import DefaultStoreApiDelegate, StoreApiDelegate
from petstore.schemas import HealthCheckResponse

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    delegate: StoreApiDelegate = Depends(get_store_delegate),
) -> HealthCheckResponse:
    """Report service status and which store delegate is serving requests."""
    # The no-op delegate answers every call, but with no data behind it.
    status = "degraded" if isinstance(delegate, DefaultStoreApiDelegate) else "ok"
    return HealthCheckResponse(
        status=status,
        version=APP_VERSION,
        delegate=f"{type(delegate).__module__}.{type(delegate).__qualname__}",
    )
