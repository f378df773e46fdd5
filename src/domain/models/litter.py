from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4

from src.domain.value_objects.father import FatherRef


@dataclass(slots=True)
class Litter:
    id: str
    mother_id: str
    father: FatherRef
    birth_date: date
    reported_litter_size: int = 0
    notes: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        mother_id: str,
        birth_date: date,
        *,
        father_id: str | None = None,
        reported_litter_size: int = 0,
        notes: str | None = None,
        litter_id: str | None = None,
    ) -> Litter:
        return cls(
            id=litter_id or uuid4().hex,
            mother_id=mother_id,
            father=FatherRef.of(father_id),
            birth_date=birth_date,
            reported_litter_size=reported_litter_size,
            notes=notes or "",
            created_at=datetime.now(timezone.utc),
        )

    @property
    def identity_key(self) -> tuple[str, str, date]:
        """The (mother, father-or-sentinel, birth date) triple that must be unique."""
        return (self.mother_id, self.father.value, self.birth_date)

    def describe(self) -> str:
        return (
            f"mother {self.mother_id}, father {self.father}, "
            f"and birth date {self.birth_date.isoformat()}"
        )
