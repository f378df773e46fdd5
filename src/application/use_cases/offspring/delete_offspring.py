from __future__ import annotations

from src.application.errors import OffspringNotFound
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, offspring_id: str) -> str:
    deleted = await uow.offspring.delete(offspring_id)
    if not deleted:
        raise OffspringNotFound(f"Offspring with ID '{offspring_id}' not found")
    await uow.commit()
    return offspring_id
