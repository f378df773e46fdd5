from __future__ import annotations

import logging

from src.application.errors import LitterNotFound
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, litter_id: str) -> str:
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise LitterNotFound(f"Litter with ID '{litter_id}' not found")
    removed = await uow.offspring.delete_by_litter(litter_id)
    await uow.litters.delete(litter_id)
    await uow.commit()
    logger.info("Litter %s deleted together with %d offspring", litter_id, removed)
    return litter_id
