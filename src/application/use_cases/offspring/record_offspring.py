from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import LitterNotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.offspring import Offspring
from src.domain.value_objects.sex import OffspringSex


@dataclass(slots=True)
class RecordOffspringInput:
    litter_id: str
    offspring_id: str
    sex: str
    notes: str | None = None


def parse_sex(value: str) -> OffspringSex:
    try:
        return OffspringSex(value)
    except ValueError as exc:
        valid = ", ".join(s.value for s in OffspringSex)
        raise ValidationError(f"Invalid sex. Must be one of: {valid}") from exc


async def execute(uow: UnitOfWork, payload: RecordOffspringInput) -> Offspring:
    offspring_id = payload.offspring_id.strip()
    if not offspring_id:
        raise ValidationError("Offspring id is required")
    sex = parse_sex(payload.sex)

    litter = await uow.litters.get(payload.litter_id)
    if not litter:
        raise LitterNotFound(f"Litter with ID '{payload.litter_id}' not found")

    # Raises DuplicateOffspring when the id is used anywhere in the store
    created = await uow.offspring.add(
        Offspring.create(offspring_id, litter.id, sex, notes=payload.notes)
    )
    await uow.commit()
    return created
