from __future__ import annotations

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    status: str  # "ok" | "degraded"
    version: str
    delegate: str
