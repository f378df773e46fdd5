from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.mother import Mother


@dataclass(slots=True)
class AddMotherInput:
    mother_id: str
    notes: str | None = None


async def execute(uow: UnitOfWork, payload: AddMotherInput) -> Mother:
    mother_id = payload.mother_id.strip()
    if not mother_id:
        raise ValidationError("Mother id is required")
    # Raises DuplicateMother when the id is already registered
    created = await uow.mothers.add(Mother.create(mother_id, notes=payload.notes))
    await uow.commit()
    return created
