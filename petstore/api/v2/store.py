from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Request, Response

from petstore.api.deps import get_store_delegate
from petstore.api.negotiation import JSON, XML, render
from petstore.core.security import optional_api_key
from petstore.delegates import StoreApiDelegate
from petstore.schemas import ErrorResponse, InventoryMap, Order

router = APIRouter()
logger = logging.getLogger(__name__)

ORDER_MEDIA_TYPES = (JSON, XML)

INVALID_ID: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid ID supplied"},
}
ORDER_NOT_FOUND: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Order not found"},
}
ORDER_CONTENT: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "successful operation",
        "content": {XML: {"schema": {"$ref": "#/components/schemas/Order"}}},
    },
}


@router.delete(
    "/order/{orderId}",
    operation_id="deleteOrder",
    summary="Delete purchase order by ID",
    description=(
        "For valid response try integer IDs with value < 1000. "
        "Anything above 1000 or nonintegers will generate API errors"
    ),
    response_class=Response,
    responses={**INVALID_ID, **ORDER_NOT_FOUND},
)
async def delete_order(
    request: Request,
    orderId: str = Path(  # noqa: N803
        ..., min_length=1, description="ID of the order that needs to be deleted"
    ),
    delegate: StoreApiDelegate = Depends(get_store_delegate),
) -> Response:
    logger.debug("deleteOrder orderId=%r", orderId)
    return render(await delegate.delete_order(orderId), request)


@router.get(
    "/inventory",
    operation_id="getInventory",
    summary="Returns pet inventories by status",
    description="Returns a map of status codes to quantities",
    response_model=InventoryMap,
    responses={200: {"description": "successful operation"}},
    dependencies=[Depends(optional_api_key)],
)
async def get_inventory(
    request: Request,
    delegate: StoreApiDelegate = Depends(get_store_delegate),
) -> Response:
    logger.debug("getInventory")
    return render(await delegate.get_inventory(), request)


# The documented range ("<= 5 or > 10") disagrees with the enforced 1..5 bound.
# Only the enforced bound is applied.
@router.get(
    "/order/{orderId}",
    operation_id="getOrderById",
    summary="Find purchase order by ID",
    description=(
        "For valid response try integer IDs with value <= 5 or > 10. "
        "Other values will generated exceptions"
    ),
    response_model=Order,
    response_model_by_alias=True,
    responses={**ORDER_CONTENT, **INVALID_ID, **ORDER_NOT_FOUND},
)
async def get_order_by_id(
    request: Request,
    orderId: int = Path(  # noqa: N803
        ..., ge=1, le=5, description="ID of pet that needs to be fetched"
    ),
    delegate: StoreApiDelegate = Depends(get_store_delegate),
) -> Response:
    logger.debug("getOrderById orderId=%d", orderId)
    return render(await delegate.get_order_by_id(orderId), request, ORDER_MEDIA_TYPES)


@router.post(
    "/order",
    operation_id="placeOrder",
    summary="Place an order for a pet",
    response_model=Order,
    response_model_by_alias=True,
    responses={
        **ORDER_CONTENT,
        400: {"model": ErrorResponse, "description": "Invalid Order"},
    },
)
async def place_order(
    request: Request,
    order: Order = Body(..., description="order placed for purchasing the pet"),
    delegate: StoreApiDelegate = Depends(get_store_delegate),
) -> Response:
    logger.debug("placeOrder order=%r", order)
    return render(await delegate.place_order(order), request, ORDER_MEDIA_TYPES)
