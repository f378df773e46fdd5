from __future__ import annotations

from datetime import date
from typing import Protocol

from src.domain.models.litter import Litter
from src.domain.value_objects.father import FatherRef


class LittersRepository(Protocol):
    async def add(self, litter: Litter) -> Litter: ...

    async def get(self, litter_id: str) -> Litter | None: ...

    async def find_by_identity(
        self, mother_id: str, father: FatherRef, birth_date: date
    ) -> Litter | None: ...

    async def update(self, litter: Litter) -> Litter: ...

    async def delete(self, litter_id: str) -> bool: ...

    async def list_by_mother(
        self,
        mother_id: str,
        *,
        born_from: date | None = None,
        born_to: date | None = None,
    ) -> list[Litter]: ...
