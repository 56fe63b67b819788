from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from petstore.schemas import ErrorResponse

logger = logging.getLogger(__name__)


class StoreApiError(Exception):
    """Base error a delegate may raise instead of returning an error envelope."""

    status_code: int = 400
    error_code: str = "store_error"
    default_detail: str = "Store request failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidOrderIdError(StoreApiError):
    status_code = 400
    error_code = "invalid_order_id"
    default_detail = "Invalid ID supplied"


class InvalidOrderError(StoreApiError):
    status_code = 400
    error_code = "invalid_order"
    default_detail = "Invalid Order"


class OrderNotFoundError(StoreApiError):
    status_code = 404
    error_code = "order_not_found"
    default_detail = "Order not found"


class DelegateConfigurationError(RuntimeError):
    """Configured store delegate cannot be loaded or is not a delegate."""


async def store_api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StoreApiError)
    logger.info("%s %s -> %d (%s)", request.method, request.url.path, exc.status_code, exc.error_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.detail, error_code=exc.error_code).model_dump(),
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Coercion and bound failures are the declared 400 signals, not 422.
    assert isinstance(exc, RequestValidationError)
    messages = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.info("%s %s rejected: %s", request.method, request.url.path, messages)
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(detail=messages, error_code="invalid_request").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreApiError, store_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
