from __future__ import annotations

from typing import Protocol

from src.domain.models.report import Report


class ReportsRepository(Protocol):
    async def add(self, report: Report) -> Report: ...

    async def get_by_name(self, name: str) -> Report | None: ...

    async def list(self) -> list[Report]: ...

    async def update(self, report: Report, *, expected_version: int) -> Report | None: ...

    async def delete_by_name(self, name: str) -> bool: ...
