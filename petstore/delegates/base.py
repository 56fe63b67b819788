from __future__ import annotations

from typing import Protocol, runtime_checkable

from petstore.schemas import ApiResponse, InventoryMap, Order


@runtime_checkable
class StoreApiDelegate(Protocol):
    """Business logic behind the store routes.

    Implement this protocol and point ``STORE_DELEGATE`` at the class (or an
    instance) to serve real orders. Each method returns the envelope that the
    route renders verbatim. Raising one of the ``StoreApiError`` subclasses is
    an alternative way to answer with 400/404.
    """

    async def delete_order(self, order_id: str) -> ApiResponse[None]:
        """Delete purchase order by ID."""
        ...

    async def get_inventory(self) -> ApiResponse[InventoryMap]:
        """Return a map of status codes to quantities."""
        ...

    async def get_order_by_id(self, order_id: int) -> ApiResponse[Order]:
        """Find purchase order by ID."""
        ...

    async def place_order(self, order: Order) -> ApiResponse[Order]:
        """Place an order for a pet."""
        ...
