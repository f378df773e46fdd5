from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.models.report import Report
from src.utils.datetime_tz import to_utc_date


class ReportWindowIn(BaseModel):
    target: str
    start: date
    end: date

    @field_validator("start", "end", mode="before")
    @classmethod
    def normalize_dates(cls, v):
        if isinstance(v, (str, datetime)):
            return to_utc_date(v)
        return v


class ReportGenerate(BaseModel):
    name: str
    windows: list[ReportWindowIn] = Field(min_length=1)


class ReportRename(BaseModel):
    name: str


class ReportEntryOut(BaseModel):
    target: str
    start: date
    end: date

    model_config = ConfigDict(from_attributes=True)


class PerformanceSummaryResponse(BaseModel):
    high_performers: list[str]
    low_performers: list[str]
    concerning_trends: list[str]
    average_performers: list[str]
    potential_record_errors: list[str]
    insights: str

    model_config = ConfigDict(from_attributes=True)


class ReportResponse(BaseModel):
    id: str
    name: str
    targets: list[str]
    entries: list[ReportEntryOut]
    results: dict[str, Any]
    summary: PerformanceSummaryResponse | None
    date_generated: datetime
    created_at: datetime
    version: int

    @classmethod
    def from_domain(cls, report: Report) -> ReportResponse:
        return cls(
            id=report.id,
            name=report.name,
            targets=report.targets,
            entries=[ReportEntryOut.model_validate(e) for e in report.entries],
            results=report.results.to_dict(),
            summary=(
                PerformanceSummaryResponse.model_validate(report.summary)
                if report.summary
                else None
            ),
            date_generated=report.date_generated,
            created_at=report.created_at,
            version=report.version,
        )


class ReportListItem(BaseModel):
    name: str
    targets: list[str]
    date_generated: datetime
    has_summary: bool
