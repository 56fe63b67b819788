from __future__ import annotations

from .common import ApiResponse, ErrorResponse, OrderStatus
from .health import HealthCheckResponse
from .order import InventoryMap, Order

__all__ = [
    # common
    "ApiResponse",
    "ErrorResponse",
    "OrderStatus",
    # health
    "HealthCheckResponse",
    # order
    "InventoryMap",
    "Order",
]
