from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any
from uuid import uuid4

from src.domain.models.performance_summary import PerformanceSummary

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True, slots=True)
class ReportEntry:
    """One (target, date window) combination folded into a report. Both ends inclusive."""

    target: str
    start: date
    end: date

    @property
    def key(self) -> tuple[str, date, date]:
        return (self.target, self.start, self.end)

    def to_dict(self) -> dict[str, str]:
        return {
            "target": self.target,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReportEntry:
        return cls(
            target=str(data["target"]),
            start=date.fromisoformat(data["start"]),
            end=date.fromisoformat(data["end"]),
        )


@dataclass(frozen=True, slots=True)
class PerformanceMetrics:
    litters_recorded: int = 0
    total_reported_litter_size: int = 0
    total_offspring_born: int = 0
    total_offspring_weaned: int = 0
    total_deceased_offspring: int = 0
    average_actual_offspring_per_litter: float | None = None
    weaning_survivability_rate: str = NOT_AVAILABLE

    def to_dict(self) -> dict[str, Any]:
        average = self.average_actual_offspring_per_litter
        return {
            "litters_recorded": self.litters_recorded,
            "total_reported_litter_size": self.total_reported_litter_size,
            "total_offspring_born": self.total_offspring_born,
            "total_offspring_weaned": self.total_offspring_weaned,
            "total_deceased_offspring": self.total_deceased_offspring,
            "average_actual_offspring_per_litter": NOT_AVAILABLE if average is None else average,
            "weaning_survivability_rate": self.weaning_survivability_rate,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PerformanceMetrics:
        average = data.get("average_actual_offspring_per_litter", NOT_AVAILABLE)
        return cls(
            litters_recorded=int(data.get("litters_recorded", 0)),
            total_reported_litter_size=int(data.get("total_reported_litter_size", 0)),
            total_offspring_born=int(data.get("total_offspring_born", 0)),
            total_offspring_weaned=int(data.get("total_offspring_weaned", 0)),
            total_deceased_offspring=int(data.get("total_deceased_offspring", 0)),
            average_actual_offspring_per_litter=(
                None if average == NOT_AVAILABLE else float(average)
            ),
            weaning_survivability_rate=str(
                data.get("weaning_survivability_rate", NOT_AVAILABLE)
            ),
        )


@dataclass(frozen=True, slots=True)
class ReportResults:
    group: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    per_target: dict[str, PerformanceMetrics] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        group = self.group.to_dict()
        group["targets"] = len(self.per_target)
        return {
            "group": group,
            "per_target": {target: m.to_dict() for target, m in self.per_target.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ReportResults:
        if not data:
            return cls()
        return cls(
            group=PerformanceMetrics.from_dict(data.get("group", {})),
            per_target={
                target: PerformanceMetrics.from_dict(metrics)
                for target, metrics in (data.get("per_target") or {}).items()
            },
        )


@dataclass(slots=True)
class Report:
    id: str
    name: str
    entries: list[ReportEntry] = field(default_factory=list)
    results: ReportResults = field(default_factory=ReportResults)
    summary: PerformanceSummary | None = None
    date_generated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(cls, name: str) -> Report:
        now = datetime.now(timezone.utc)
        return cls(id=uuid4().hex, name=name, date_generated=now, created_at=now, version=1)

    @property
    def targets(self) -> list[str]:
        """Distinct targets in the order they were first added."""
        return list(dict.fromkeys(entry.target for entry in self.entries))

    def has_entry(self, entry: ReportEntry) -> bool:
        return any(existing.key == entry.key for existing in self.entries)

    def extend(self, new_entries: list[ReportEntry], results: ReportResults) -> None:
        self.entries = [*self.entries, *new_entries]
        self.results = results
        # The stored summary described data that has just changed.
        self.summary = None
        self.touch()

    def attach_summary(self, summary: PerformanceSummary) -> None:
        self.summary = summary
        self.bump_version()

    def rename(self, new_name: str) -> None:
        self.name = new_name
        self.bump_version()

    def touch(self) -> None:
        self.date_generated = datetime.now(timezone.utc)
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
