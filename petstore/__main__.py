from __future__ import annotations

import uvicorn

from petstore.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "petstore.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.app_log_level.lower(),
        reload=settings.app_debug,
    )
