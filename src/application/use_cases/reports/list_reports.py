from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.report import Report


async def execute(uow: UnitOfWork) -> list[Report]:
    return await uow.reports.list()
