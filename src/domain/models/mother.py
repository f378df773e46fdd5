from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(slots=True)
class Mother:
    id: str
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, mother_id: str, notes: str | None = None) -> Mother:
        return cls(
            id=mother_id,
            notes=notes or "",
            created_at=datetime.now(timezone.utc),
        )
