from __future__ import annotations

import logging

from src.application.errors import (
    ConflictError,
    InvalidClassificationResponse,
    MisconfiguredCredential,
    ReportNotFound,
)
from src.application.interfaces.classifier import PerformanceClassifier
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.reports.classification import (
    build_classification_request,
    parse_classification_response,
    validate_classification,
)
from src.domain.models.performance_summary import PerformanceSummary

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    classifier: PerformanceClassifier | None,
    report_name: str,
    *,
    regenerate: bool = False,
) -> PerformanceSummary:
    """Classify the report's targets into performance buckets.

    A stored summary is returned as-is unless ``regenerate`` is set. A fresh summary is
    only persisted after it passes validation against the report's targets, and only if
    the report has not changed since it was read.
    """
    report = await uow.reports.get_by_name(report_name)
    if not report:
        raise ReportNotFound(f"Report with name '{report_name}' not found")

    if report.summary is not None and not regenerate:
        return report.summary

    if classifier is None:
        raise MisconfiguredCredential(
            "Performance classifier is not configured (missing OpenAI API key)"
        )

    expected_version = report.version
    targets = list(report.results.per_target.keys())
    request = build_classification_request(report)

    logger.info(
        "Requesting classification for report '%s' (%d targets)", report.name, len(targets)
    )
    raw = await classifier.classify(request)

    try:
        summary = parse_classification_response(raw)
        validate_classification(summary, targets)
    except InvalidClassificationResponse as exc:
        logger.warning(
            "Rejected classification for report '%s': %s", report.name, exc.details or exc.message
        )
        raise

    report.attach_summary(summary)
    saved = await uow.reports.update(report, expected_version=expected_version)
    if saved is None:
        raise ConflictError(
            f"Report '{report.name}' changed while it was being classified, retry the request"
        )
    await uow.commit()
    logger.info("Stored classification for report '%s'", report.name)
    return summary
