from __future__ import annotations

from src.application.errors import LitterNotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.offspring import Offspring


async def execute(uow: UnitOfWork, litter_id: str) -> list[Offspring]:
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise LitterNotFound(f"Litter with ID '{litter_id}' not found")
    return await uow.offspring.list_by_litter(litter_id)
