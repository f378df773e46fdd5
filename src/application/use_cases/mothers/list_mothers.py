from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.mother import Mother


async def execute(uow: UnitOfWork) -> list[Mother]:
    return await uow.mothers.list()
