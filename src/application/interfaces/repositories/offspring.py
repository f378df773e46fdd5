from __future__ import annotations

from typing import Iterable, Protocol

from src.domain.models.offspring import Offspring


class OffspringRepository(Protocol):
    async def add(self, offspring: Offspring) -> Offspring: ...

    async def get(self, offspring_id: str) -> Offspring | None: ...

    async def update(self, offspring: Offspring, *, current_id: str | None = None) -> Offspring: ...

    async def delete(self, offspring_id: str) -> bool: ...

    async def delete_by_litter(self, litter_id: str) -> int: ...

    async def list_by_litter(self, litter_id: str) -> list[Offspring]: ...

    async def list_by_litters(self, litter_ids: Iterable[str]) -> list[Offspring]: ...
