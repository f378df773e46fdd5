from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime

from src.application.errors import ConflictError, InvalidRange, UnknownTarget, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.reports.statistics import build_results
from src.domain.models.litter import Litter
from src.domain.models.report import Report, ReportEntry, ReportResults
from src.utils.datetime_tz import to_utc_date

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReportWindow:
    target: str
    start: date | datetime | str
    end: date | datetime | str


def _to_entries(windows: Sequence[ReportWindow]) -> list[ReportEntry]:
    entries: list[ReportEntry] = []
    for window in windows:
        target = window.target.strip()
        if not target:
            raise ValidationError("Report target is required")
        start = to_utc_date(window.start)
        end = to_utc_date(window.end)
        if start >= end:
            raise InvalidRange(
                f"Start date must be before end date for target '{target}'",
                details={"target": target, "start": start.isoformat(), "end": end.isoformat()},
            )
        entries.append(ReportEntry(target=target, start=start, end=end))
    return entries


async def _recompute(uow: UnitOfWork, entries: Sequence[ReportEntry]) -> ReportResults:
    litters_by_target: dict[str, dict[str, Litter]] = {}
    for entry in entries:
        selected = litters_by_target.setdefault(entry.target, {})
        litters = await uow.litters.list_by_mother(
            entry.target, born_from=entry.start, born_to=entry.end
        )
        for litter in litters:
            selected.setdefault(litter.id, litter)

    litter_ids = [lid for selected in litters_by_target.values() for lid in selected]
    offspring = await uow.offspring.list_by_litters(litter_ids)
    return build_results(
        {target: list(selected.values()) for target, selected in litters_by_target.items()},
        offspring,
    )


async def execute(uow: UnitOfWork, report_name: str, windows: Sequence[ReportWindow]) -> Report:
    """Create the named report or fold new (target, window) entries into it.

    Windows already present in the report are skipped. Nothing is applied unless every
    window is valid and every target is a registered mother.
    """
    name = report_name.strip()
    if not name:
        raise ValidationError("Report name is required")
    if not windows:
        raise ValidationError("At least one target window is required")

    requested = _to_entries(windows)

    targets = list(dict.fromkeys(entry.target for entry in requested))
    known = await uow.mothers.existing_ids(targets)
    unknown = [target for target in targets if target not in known]
    if unknown:
        raise UnknownTarget(
            f"Targets are not registered mothers: {', '.join(unknown)}",
            details={"unknown_targets": unknown},
        )

    report = await uow.reports.get_by_name(name)
    is_new = report is None
    if report is None:
        report = Report.create(name)
    expected_version = report.version

    seen = {entry.key for entry in report.entries}
    new_entries: list[ReportEntry] = []
    for entry in requested:
        if entry.key in seen:
            continue
        seen.add(entry.key)
        new_entries.append(entry)

    if new_entries:
        results = await _recompute(uow, [*report.entries, *new_entries])
        report.extend(new_entries, results)
        logger.info(
            "Report '%s': added %d entries, %d targets in total",
            name,
            len(new_entries),
            len(report.targets),
        )
    else:
        report.touch()
        logger.debug("Report '%s': all windows already present", name)

    if is_new:
        saved = await uow.reports.add(report)
    else:
        saved = await uow.reports.update(report, expected_version=expected_version)
        if saved is None:
            raise ConflictError(f"Report '{name}' was modified concurrently, retry the request")
    await uow.commit()
    return saved
