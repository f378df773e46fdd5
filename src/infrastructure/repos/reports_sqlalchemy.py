from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ReportNameConflict
from src.application.interfaces.repositories.reports import ReportsRepository
from src.domain.models.performance_summary import PerformanceSummary
from src.domain.models.report import Report, ReportEntry, ReportResults
from src.infrastructure.db.orm.report import ReportORM


class ReportsSQLAlchemyRepository(ReportsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ReportORM) -> Report:
        return Report(
            id=orm.id,
            name=orm.name,
            entries=[ReportEntry.from_dict(e) for e in orm.entries or []],
            results=ReportResults.from_dict(orm.results),
            summary=PerformanceSummary.from_dict(orm.summary) if orm.summary else None,
            date_generated=orm.date_generated,
            created_at=orm.created_at,
            version=orm.version,
        )

    def _values(self, report: Report) -> dict:
        return {
            "name": report.name,
            "entries": [entry.to_dict() for entry in report.entries],
            "results": report.results.to_dict(),
            "summary": report.summary.to_dict() if report.summary else None,
            "date_generated": report.date_generated,
            "version": report.version,
        }

    async def add(self, report: Report) -> Report:
        orm = ReportORM(id=report.id, created_at=report.created_at, **self._values(report))
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ReportNameConflict(f"A report with name '{report.name}' already exists") from exc
        return self._to_domain(orm)

    async def get_by_name(self, name: str) -> Report | None:
        res = await self.session.execute(select(ReportORM).where(ReportORM.name == name))
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[Report]:
        res = await self.session.execute(select(ReportORM).order_by(ReportORM.name))
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, report: Report, *, expected_version: int) -> Report | None:
        stmt = (
            update(ReportORM)
            .where(ReportORM.id == report.id)
            .where(ReportORM.version == expected_version)
            .values(**self._values(report))
            .returning(ReportORM)
        )
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ReportNameConflict(f"A report with name '{report.name}' already exists") from exc
        orm = res.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def delete_by_name(self, name: str) -> bool:
        res = await self.session.execute(
            delete(ReportORM).where(ReportORM.name == name).returning(ReportORM.id)
        )
        return res.scalar_one_or_none() is not None
