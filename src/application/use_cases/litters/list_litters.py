from __future__ import annotations

from src.application.errors import MotherNotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.litter import Litter


async def execute(uow: UnitOfWork, mother_id: str) -> list[Litter]:
    mother = await uow.mothers.get(mother_id)
    if not mother:
        raise MotherNotFound(f"Mother with ID '{mother_id}' not found")
    return await uow.litters.list_by_mother(mother_id)
