from __future__ import annotations

from fastapi import Security
from fastapi.security import APIKeyHeader

# Declared in the OpenAPI schema only; checking the key is left to the delegate.
api_key_header = APIKeyHeader(name="api_key", scheme_name="api_key", auto_error=False)


async def optional_api_key(api_key: str | None = Security(api_key_header)) -> str | None:
    """Expose the ``api_key`` header without rejecting requests that lack it."""
    return api_key
