from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.litter import Litter
from src.utils.datetime_tz import to_utc_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordLitterInput:
    mother_id: str
    birth_date: date | datetime
    reported_litter_size: int
    father_id: str | None = None
    notes: str | None = None
    litter_id: str | None = None


async def execute(uow: UnitOfWork, payload: RecordLitterInput) -> Litter:
    mother_id = payload.mother_id.strip()
    if not mother_id:
        raise ValidationError("Mother id is required")
    if payload.reported_litter_size < 0:
        raise ValidationError("Reported litter size cannot be negative")

    litter = Litter.create(
        mother_id=mother_id,
        birth_date=to_utc_date(payload.birth_date),
        father_id=payload.father_id,
        reported_litter_size=payload.reported_litter_size,
        notes=payload.notes,
        litter_id=payload.litter_id,
    )

    if await uow.mothers.ensure(mother_id):
        logger.info("Mother %s registered while recording a litter", mother_id)

    # Raises DuplicateLitter when the (mother, father, birth date) triple exists
    created = await uow.litters.add(litter)
    await uow.commit()
    return created
