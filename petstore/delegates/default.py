from __future__ import annotations

from petstore.schemas import ApiResponse, InventoryMap, Order


class DefaultStoreApiDelegate:
    """No-op delegate: every operation succeeds with an empty body."""

    async def delete_order(self, order_id: str) -> ApiResponse[None]:
        return ApiResponse[None]()

    async def get_inventory(self) -> ApiResponse[InventoryMap]:
        return ApiResponse[InventoryMap]()

    async def get_order_by_id(self, order_id: int) -> ApiResponse[Order]:
        return ApiResponse[Order]()

    async def place_order(self, order: Order) -> ApiResponse[Order]:
        return ApiResponse[Order]()
