from __future__ import annotations

from src.application.errors import AlreadyDeceased, OffspringNotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.offspring import Offspring


async def execute(uow: UnitOfWork, offspring_id: str) -> Offspring:
    """Mark an offspring as dead.

    The weaned flag is reset as well, so the animal stops counting as a weaning
    success in every report generated afterwards.
    """
    offspring = await uow.offspring.get(offspring_id)
    if not offspring:
        raise OffspringNotFound(f"Offspring with ID '{offspring_id}' not found")
    if not offspring.is_alive:
        raise AlreadyDeceased(f"Offspring with ID '{offspring_id}' is already marked as deceased")
    offspring.mark_deceased()
    updated = await uow.offspring.update(offspring)
    await uow.commit()
    return updated
