from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from src.domain.value_objects.sex import OffspringSex


class OffspringCreate(BaseModel):
    id: str
    sex: str
    notes: str | None = None


class OffspringUpdate(BaseModel):
    id: str | None = None  # new id when renaming
    litter_id: str | None = None
    sex: str | None = None
    notes: str | None = None


class OffspringResponse(BaseModel):
    id: str
    litter_id: str
    sex: OffspringSex
    is_alive: bool
    is_weaned: bool
    notes: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
