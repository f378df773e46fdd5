from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.litters import LittersRepository
from src.application.interfaces.repositories.mothers import MothersRepository
from src.application.interfaces.repositories.offspring import OffspringRepository
from src.application.interfaces.repositories.reports import ReportsRepository


class UnitOfWork(Protocol):
    mothers: MothersRepository
    litters: LittersRepository
    offspring: OffspringRepository
    reports: ReportsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
