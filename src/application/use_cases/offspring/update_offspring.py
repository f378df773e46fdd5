from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import (
    DuplicateOffspring,
    LitterNotFound,
    OffspringNotFound,
    ValidationError,
)
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.offspring.record_offspring import parse_sex
from src.domain.models.offspring import Offspring


@dataclass(slots=True)
class UpdateOffspringInput:
    new_offspring_id: str | None = None
    litter_id: str | None = None
    sex: str | None = None
    notes: str | None = None


async def execute(uow: UnitOfWork, offspring_id: str, payload: UpdateOffspringInput) -> Offspring:
    offspring = await uow.offspring.get(offspring_id)
    if not offspring:
        raise OffspringNotFound(f"Offspring with ID '{offspring_id}' not found")

    if payload.litter_id is not None and payload.litter_id != offspring.litter_id:
        litter = await uow.litters.get(payload.litter_id)
        if not litter:
            raise LitterNotFound(f"Litter with ID '{payload.litter_id}' not found")
        offspring.litter_id = litter.id
    if payload.sex is not None:
        offspring.sex = parse_sex(payload.sex)
    if payload.notes is not None:
        offspring.notes = payload.notes

    current_id = offspring.id
    if payload.new_offspring_id is not None:
        new_id = payload.new_offspring_id.strip()
        if not new_id:
            raise ValidationError("Offspring id cannot be empty")
        if new_id != current_id:
            if await uow.offspring.get(new_id):
                raise DuplicateOffspring(
                    f"Offspring with ID '{new_id}' already exists. Cannot rename."
                )
            offspring.id = new_id

    updated = await uow.offspring.update(offspring, current_id=current_id)
    await uow.commit()
    return updated
