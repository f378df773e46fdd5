from __future__ import annotations

from src.application.errors import AlreadyWeaned, NotAlive, OffspringNotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.offspring import Offspring


async def execute(uow: UnitOfWork, offspring_id: str) -> Offspring:
    offspring = await uow.offspring.get(offspring_id)
    if not offspring:
        raise OffspringNotFound(f"Offspring with ID '{offspring_id}' not found")
    if not offspring.is_alive:
        raise NotAlive(f"Offspring with ID '{offspring_id}' is not alive and cannot be weaned")
    if offspring.is_weaned:
        raise AlreadyWeaned(f"Offspring with ID '{offspring_id}' is already weaned")
    offspring.mark_weaned()
    updated = await uow.offspring.update(offspring)
    await uow.commit()
    return updated
