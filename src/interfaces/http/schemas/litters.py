from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, field_validator

from src.domain.models.litter import Litter
from src.utils.datetime_tz import to_utc_date


class LitterCreate(BaseModel):
    mother_id: str
    father_id: str | None = None
    birth_date: date
    reported_litter_size: int
    notes: str | None = None
    id: str | None = None

    @field_validator("birth_date", mode="before")
    @classmethod
    def normalize_birth_date(cls, v):
        # Datetimes with an offset keep their UTC calendar day
        if isinstance(v, (str, datetime)):
            return to_utc_date(v)
        return v


class LitterUpdate(BaseModel):
    mother_id: str | None = None
    father_id: str | None = None
    clear_father: bool = False
    birth_date: date | None = None
    reported_litter_size: int | None = None
    notes: str | None = None

    @field_validator("birth_date", mode="before")
    @classmethod
    def normalize_birth_date(cls, v):
        if isinstance(v, (str, datetime)):
            return to_utc_date(v)
        return v


class LitterResponse(BaseModel):
    id: str
    mother_id: str
    father_id: str | None
    birth_date: date
    reported_litter_size: int
    notes: str
    created_at: datetime

    @classmethod
    def from_domain(cls, litter: Litter) -> LitterResponse:
        return cls(
            id=litter.id,
            mother_id=litter.mother_id,
            father_id=litter.father.father_id,
            birth_date=litter.birth_date,
            reported_litter_size=litter.reported_litter_size,
            notes=litter.notes,
            created_at=litter.created_at,
        )
