from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from src.application.interfaces.classifier import PerformanceClassifier
from src.application.use_cases.reports import (
    delete_report,
    generate_report,
    list_reports,
    rename_report,
    summarize_report,
    view_report,
)
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_classifier, get_uow
from src.interfaces.http.schemas.reports import (
    PerformanceSummaryResponse,
    ReportGenerate,
    ReportListItem,
    ReportRename,
    ReportResponse,
)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/", response_model=list[ReportListItem])
async def get_reports(uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    reports = await list_reports.execute(uow)
    return [
        ReportListItem(
            name=r.name,
            targets=r.targets,
            date_generated=r.date_generated,
            has_summary=r.summary is not None,
        )
        for r in reports
    ]


@router.post("/", response_model=ReportResponse)
async def create_or_extend_report(
    payload: ReportGenerate, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    report = await generate_report.execute(
        uow,
        payload.name,
        [
            generate_report.ReportWindow(target=w.target, start=w.start, end=w.end)
            for w in payload.windows
        ],
    )
    return ReportResponse.from_domain(report)


@router.get("/{report_name}", response_model=ReportResponse)
async def get_report(report_name: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    report = await view_report.execute(uow, report_name)
    return ReportResponse.from_domain(report)


@router.patch("/{report_name}", response_model=ReportResponse)
async def patch_report(
    report_name: str, payload: ReportRename, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    report = await rename_report.execute(uow, report_name, payload.name)
    return ReportResponse.from_domain(report)


@router.delete("/{report_name}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_report(report_name: str, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_report.execute(uow, report_name)
    return None


@router.post("/{report_name}/summary", response_model=PerformanceSummaryResponse)
async def summarize(
    report_name: str,
    regenerate: bool = Query(False),
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    classifier: PerformanceClassifier | None = Depends(get_classifier),
):
    summary = await summarize_report.execute(
        uow, classifier, report_name, regenerate=regenerate
    )
    return PerformanceSummaryResponse.model_validate(summary)
