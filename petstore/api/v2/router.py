from __future__ import annotations

from fastapi import APIRouter

from petstore.api.v2 import health, store

api_v2_router = APIRouter()

api_v2_router.include_router(health.router, tags=["Health"])
api_v2_router.include_router(store.router, prefix="/store", tags=["store"])
