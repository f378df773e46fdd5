from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from src.domain.value_objects.sex import OffspringSex


@dataclass(slots=True)
class Offspring:
    id: str
    litter_id: str
    sex: OffspringSex
    is_alive: bool = True
    is_weaned: bool = False
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        offspring_id: str,
        litter_id: str,
        sex: OffspringSex | str,
        notes: str | None = None,
    ) -> Offspring:
        return cls(
            id=offspring_id,
            litter_id=litter_id,
            sex=OffspringSex(sex),
            is_alive=True,
            is_weaned=False,
            notes=notes or "",
            created_at=datetime.now(timezone.utc),
        )

    def mark_weaned(self) -> None:
        self.is_weaned = True

    def mark_deceased(self) -> None:
        # Death revokes weaning credit: a dead animal never counts as weaned.
        self.is_alive = False
        self.is_weaned = False
