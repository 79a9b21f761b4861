from __future__ import annotations

from pydantic import BaseModel, Field


class UidResponse(BaseModel):
    id: str = Field(..., description="base36(epoch ms) followed by base36(random)")


class ErrorResponse(BaseModel):
    detail: str
