from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

from src.application.errors import DuplicateLitter, LitterNotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.litter import Litter
from src.domain.value_objects.father import FatherRef
from src.utils.datetime_tz import to_utc_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateLitterInput:
    mother_id: str | None = None
    father_id: str | None = None
    # Set to record that the father is no longer known; father_id is ignored then.
    clear_father: bool = False
    birth_date: date | datetime | None = None
    reported_litter_size: int | None = None
    notes: str | None = None


async def execute(uow: UnitOfWork, litter_id: str, payload: UpdateLitterInput) -> Litter:
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise LitterNotFound(f"Litter with ID '{litter_id}' not found")

    if payload.mother_id is not None:
        mother_id = payload.mother_id.strip()
        if not mother_id:
            raise ValidationError("Mother id cannot be empty")
        litter.mother_id = mother_id
    if payload.clear_father:
        litter.father = FatherRef.unknown()
    elif payload.father_id is not None:
        litter.father = FatherRef.of(payload.father_id)
    if payload.birth_date is not None:
        litter.birth_date = to_utc_date(payload.birth_date)
    if payload.reported_litter_size is not None:
        if payload.reported_litter_size < 0:
            raise ValidationError("Reported litter size cannot be negative")
        litter.reported_litter_size = payload.reported_litter_size
    if payload.notes is not None:
        litter.notes = payload.notes

    clash = await uow.litters.find_by_identity(litter.mother_id, litter.father, litter.birth_date)
    if clash and clash.id != litter.id:
        raise DuplicateLitter(f"A litter with {litter.describe()} already exists")

    if payload.mother_id is not None and await uow.mothers.ensure(litter.mother_id):
        logger.info("Mother %s registered while updating litter %s", litter.mother_id, litter_id)

    updated = await uow.litters.update(litter)
    await uow.commit()
    return updated
