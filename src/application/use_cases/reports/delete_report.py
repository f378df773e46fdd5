from __future__ import annotations

import logging

from src.application.errors import ReportNotFound
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, report_name: str) -> str:
    deleted = await uow.reports.delete_by_name(report_name)
    if not deleted:
        raise ReportNotFound(f"Report with name '{report_name}' not found")
    await uow.commit()
    logger.info("Report '%s' deleted", report_name)
    return report_name
