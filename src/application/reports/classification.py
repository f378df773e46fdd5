"""Request/response contract for the external performance classifier.

The classifier is an untrusted oracle. This module builds its request from report data
deterministically and rejects any response that is not exactly the expected document or
that breaks the completeness and exclusivity rules.
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from src.application.errors import InvalidClassificationResponse
from src.application.interfaces.classifier import ClassificationRequest
from src.domain.models.performance_summary import (
    AVERAGE_PERFORMERS,
    CATEGORY_FIELDS,
    INSIGHTS,
    POTENTIAL_RECORD_ERRORS,
    TIER_FIELDS,
    PerformanceSummary,
)
from src.domain.models.report import Report

PROMPTS_DIR = Path(__file__).parent / "prompts"
CLASSIFICATION_INSTRUCTION = (PROMPTS_DIR / "performance_classification.txt").read_text(
    encoding="utf-8"
)

EXPECTED_FIELDS = frozenset((*CATEGORY_FIELDS, INSIGHTS))


def report_payload(report: Report) -> dict[str, Any]:
    return {
        "name": report.name,
        "targets": list(report.results.per_target.keys()),
        "entries": [entry.to_dict() for entry in report.entries],
        "results": report.results.to_dict(),
    }


def build_classification_request(report: Report) -> ClassificationRequest:
    report_json = json.dumps(report_payload(report), sort_keys=True, indent=2)
    return ClassificationRequest(instruction=CLASSIFICATION_INSTRUCTION, report_json=report_json)


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```json"):
        text = text[len("```json") :].lstrip()
    elif text.startswith("```"):
        text = text[len("```") :].lstrip()
    if text.endswith("```"):
        text = text[: -len("```")].rstrip()
    return text


def parse_classification_response(raw: str) -> PerformanceSummary:
    """Parse the raw service output into a summary, rejecting anything but the exact shape."""
    text = _strip_code_fences(raw or "")
    if not text:
        raise InvalidClassificationResponse("Empty response from classification service")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidClassificationResponse(
            "Classification response is not valid JSON",
            details={"raw_response": text[:200]},
        ) from exc
    if not isinstance(data, dict):
        raise InvalidClassificationResponse("Classification response must be a JSON object")

    keys = set(data.keys())
    if keys != EXPECTED_FIELDS:
        raise InvalidClassificationResponse(
            "Classification response does not have the expected fields",
            details={
                "missing": sorted(EXPECTED_FIELDS - keys),
                "unexpected": sorted(keys - EXPECTED_FIELDS),
            },
        )
    for name in CATEGORY_FIELDS:
        value = data[name]
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise InvalidClassificationResponse(f"'{name}' must be an array of strings")
    if not isinstance(data[INSIGHTS], str):
        raise InvalidClassificationResponse(f"'{INSIGHTS}' must be a string")
    return PerformanceSummary.from_dict(data)


def find_violations(summary: PerformanceSummary, targets: Sequence[str]) -> list[str]:
    """Every completeness/exclusivity problem in ``summary``; empty when it is acceptable."""
    violations: list[str] = []
    categories = summary.categories()
    expected = set(targets)

    placements: dict[str, list[str]] = {}
    for name, ids in categories.items():
        for target_id, count in Counter(ids).items():
            if count > 1:
                violations.append(f"'{target_id}' is listed {count} times in '{name}'")
            placements.setdefault(target_id, []).append(name)

    for target_id in placements:
        if target_id not in expected:
            violations.append(f"'{target_id}' is not a target of this report")

    for target_id in targets:
        names = placements.get(target_id, [])
        if not names:
            violations.append(f"'{target_id}' is not classified")
            continue
        if POTENTIAL_RECORD_ERRORS in names:
            tiers = [name for name in names if name in TIER_FIELDS]
            if tiers:
                violations.append(
                    f"'{target_id}' is flagged as a potential record error "
                    f"but also listed in {', '.join(tiers)}"
                )
                continue
        if AVERAGE_PERFORMERS in names and len(names) > 1:
            others = [name for name in names if name != AVERAGE_PERFORMERS]
            violations.append(
                f"'{target_id}' is an average performer but also listed in {', '.join(others)}"
            )
            continue
        if len(names) > 1:
            violations.append(f"'{target_id}' is listed in more than one category")

    return violations


def validate_classification(summary: PerformanceSummary, targets: Sequence[str]) -> None:
    violations = find_violations(summary, targets)
    if violations:
        raise InvalidClassificationResponse(
            "Classification response violates the classification rules",
            details={"violations": violations},
        )
