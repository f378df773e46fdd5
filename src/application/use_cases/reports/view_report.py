from __future__ import annotations

from src.application.errors import ReportNotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.report import Report


async def execute(uow: UnitOfWork, report_name: str) -> Report:
    report = await uow.reports.get_by_name(report_name)
    if not report:
        raise ReportNotFound(f"Report with name '{report_name}' not found")
    return report
