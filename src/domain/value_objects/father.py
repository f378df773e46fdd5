from __future__ import annotations

from dataclasses import dataclass

# Stored in place of a father id whenever the father is not known.
UNKNOWN_FATHER_ID = "UNKNOWN_FATHER"


@dataclass(frozen=True, slots=True)
class FatherRef:
    """Father of a litter, either a known animal id or the unknown sentinel.

    Equality and hashing work on the stored value, so two unknown fathers always
    compare equal and uniqueness checks never have to special-case ``None``.
    """

    value: str

    @classmethod
    def of(cls, father_id: str | None) -> FatherRef:
        if father_id is None or not father_id.strip():
            return cls.unknown()
        return cls(father_id.strip())

    @classmethod
    def unknown(cls) -> FatherRef:
        return cls(UNKNOWN_FATHER_ID)

    @property
    def is_unknown(self) -> bool:
        return self.value == UNKNOWN_FATHER_ID

    @property
    def father_id(self) -> str | None:
        return None if self.is_unknown else self.value

    def __str__(self) -> str:
        return "none" if self.is_unknown else self.value
