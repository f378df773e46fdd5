from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ClassificationRequest:
    instruction: str
    report_json: str


class PerformanceClassifier(Protocol):
    """External analysis service that sorts report targets into performance buckets.

    Implementations return the raw response text; parsing and validation happen in the
    application layer so a misbehaving service can never write an invalid summary.
    """

    async def classify(self, request: ClassificationRequest) -> str: ...
