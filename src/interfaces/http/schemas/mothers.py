from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class MotherCreate(BaseModel):
    id: str
    notes: str | None = None


class MotherResponse(BaseModel):
    id: str
    notes: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
