from __future__ import annotations

import logging

from src.application.errors import MotherNotFound
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, mother_id: str) -> str:
    """Remove a mother from the registry.

    Litters recorded for her are left in place and keep referencing her id.
    """
    deleted = await uow.mothers.delete(mother_id)
    if not deleted:
        raise MotherNotFound(f"Mother with ID '{mother_id}' not found")
    await uow.commit()
    logger.info("Mother %s removed from registry", mother_id)
    return mother_id
