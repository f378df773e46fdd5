from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

HIGH_PERFORMERS = "highPerformers"
LOW_PERFORMERS = "lowPerformers"
CONCERNING_TRENDS = "concerningTrends"
AVERAGE_PERFORMERS = "averagePerformers"
POTENTIAL_RECORD_ERRORS = "potentialRecordErrors"
INSIGHTS = "insights"

CATEGORY_FIELDS: tuple[str, ...] = (
    HIGH_PERFORMERS,
    LOW_PERFORMERS,
    CONCERNING_TRENDS,
    AVERAGE_PERFORMERS,
    POTENTIAL_RECORD_ERRORS,
)
# Categories that rank performance; an error-flagged target may not appear in any of them.
TIER_FIELDS: tuple[str, ...] = (
    HIGH_PERFORMERS,
    LOW_PERFORMERS,
    CONCERNING_TRENDS,
    AVERAGE_PERFORMERS,
)


@dataclass(slots=True)
class PerformanceSummary:
    high_performers: list[str] = field(default_factory=list)
    low_performers: list[str] = field(default_factory=list)
    concerning_trends: list[str] = field(default_factory=list)
    average_performers: list[str] = field(default_factory=list)
    potential_record_errors: list[str] = field(default_factory=list)
    insights: str = ""

    def categories(self) -> dict[str, list[str]]:
        return {
            HIGH_PERFORMERS: self.high_performers,
            LOW_PERFORMERS: self.low_performers,
            CONCERNING_TRENDS: self.concerning_trends,
            AVERAGE_PERFORMERS: self.average_performers,
            POTENTIAL_RECORD_ERRORS: self.potential_record_errors,
        }

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {name: list(ids) for name, ids in self.categories().items()}
        data[INSIGHTS] = self.insights
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PerformanceSummary:
        return cls(
            high_performers=list(data.get(HIGH_PERFORMERS, [])),
            low_performers=list(data.get(LOW_PERFORMERS, [])),
            concerning_trends=list(data.get(CONCERNING_TRENDS, [])),
            average_performers=list(data.get(AVERAGE_PERFORMERS, [])),
            potential_record_errors=list(data.get(POTENTIAL_RECORD_ERRORS, [])),
            insights=str(data.get(INSIGHTS, "")),
        )
