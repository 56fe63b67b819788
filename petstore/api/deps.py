from __future__ import annotations

from fastapi import Request

from petstore.delegates import StoreApiDelegate


def get_store_delegate(request: Request) -> StoreApiDelegate:
    """Delegate installed on the application at startup."""
    delegate: StoreApiDelegate = request.app.state.store_delegate
    return delegate


__all__ = ["get_store_delegate"]
