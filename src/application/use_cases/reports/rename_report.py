from __future__ import annotations

from src.application.errors import (
    ConflictError,
    ReportNameConflict,
    ReportNotFound,
    ValidationError,
)
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.report import Report


async def execute(uow: UnitOfWork, old_name: str, new_name: str) -> Report:
    new_name = new_name.strip()
    if not new_name:
        raise ValidationError("New report name is required")

    report = await uow.reports.get_by_name(old_name)
    if not report:
        raise ReportNotFound(f"Report with name '{old_name}' not found")
    if new_name == report.name:
        return report
    if await uow.reports.get_by_name(new_name):
        raise ReportNameConflict(f"A report with name '{new_name}' already exists")

    expected_version = report.version
    report.rename(new_name)
    # Raises ReportNameConflict if another report took the name in the meantime
    saved = await uow.reports.update(report, expected_version=expected_version)
    if saved is None:
        raise ConflictError(f"Report '{old_name}' was modified concurrently, retry the request")
    await uow.commit()
    return saved
