from __future__ import annotations

from typing import Iterable, Protocol

from src.domain.models.mother import Mother


class MothersRepository(Protocol):
    async def add(self, mother: Mother) -> Mother: ...

    async def ensure(self, mother_id: str) -> bool: ...

    async def get(self, mother_id: str) -> Mother | None: ...

    async def existing_ids(self, mother_ids: Iterable[str]) -> set[str]: ...

    async def list(self) -> list[Mother]: ...

    async def delete(self, mother_id: str) -> bool: ...
