from __future__ import annotations

from dataclasses import replace
from datetime import date
from types import SimpleNamespace

import pytest

from src.application.errors import (
    ConflictError,
    DuplicateLitter,
    DuplicateMother,
    DuplicateOffspring,
    ReportNameConflict,
)
from src.domain.models.litter import Litter
from src.domain.models.mother import Mother
from src.domain.models.offspring import Offspring
from src.domain.models.report import Report
from src.domain.value_objects.father import FatherRef


class InMemoryMothers:
    def __init__(self) -> None:
        self.items: dict[str, Mother] = {}

    async def add(self, mother: Mother) -> Mother:
        if mother.id in self.items:
            raise DuplicateMother(f"Mother with ID '{mother.id}' already exists")
        self.items[mother.id] = replace(mother)
        return mother

    async def ensure(self, mother_id: str) -> bool:
        if mother_id in self.items:
            return False
        self.items[mother_id] = Mother.create(mother_id)
        return True

    async def get(self, mother_id: str) -> Mother | None:
        mother = self.items.get(mother_id)
        return replace(mother) if mother else None

    async def existing_ids(self, mother_ids) -> set[str]:
        return {m for m in mother_ids if m in self.items}

    async def list(self) -> list[Mother]:
        return [replace(self.items[k]) for k in sorted(self.items)]

    async def delete(self, mother_id: str) -> bool:
        return self.items.pop(mother_id, None) is not None


class InMemoryLitters:
    def __init__(self) -> None:
        self.items: dict[str, Litter] = {}

    async def add(self, litter: Litter) -> Litter:
        if any(x.identity_key == litter.identity_key for x in self.items.values()):
            raise DuplicateLitter(f"A litter with {litter.describe()} already exists")
        if litter.id in self.items:
            raise ConflictError(f"Litter with ID '{litter.id}' already exists")
        self.items[litter.id] = replace(litter)
        return litter

    async def get(self, litter_id: str) -> Litter | None:
        litter = self.items.get(litter_id)
        return replace(litter) if litter else None

    async def find_by_identity(
        self, mother_id: str, father: FatherRef, birth_date: date
    ) -> Litter | None:
        for litter in self.items.values():
            if litter.identity_key == (mother_id, father.value, birth_date):
                return replace(litter)
        return None

    async def update(self, litter: Litter) -> Litter:
        self.items[litter.id] = replace(litter)
        return litter

    async def delete(self, litter_id: str) -> bool:
        return self.items.pop(litter_id, None) is not None

    async def list_by_mother(self, mother_id, *, born_from=None, born_to=None) -> list[Litter]:
        result = [
            replace(x)
            for x in self.items.values()
            if x.mother_id == mother_id
            and (born_from is None or x.birth_date >= born_from)
            and (born_to is None or x.birth_date <= born_to)
        ]
        return sorted(result, key=lambda x: (x.birth_date, x.id))


class InMemoryOffspring:
    def __init__(self) -> None:
        self.items: dict[str, Offspring] = {}

    async def add(self, offspring: Offspring) -> Offspring:
        if offspring.id in self.items:
            raise DuplicateOffspring(f"Offspring with ID '{offspring.id}' already exists")
        self.items[offspring.id] = replace(offspring)
        return offspring

    async def get(self, offspring_id: str) -> Offspring | None:
        offspring = self.items.get(offspring_id)
        return replace(offspring) if offspring else None

    async def update(self, offspring: Offspring, *, current_id: str | None = None) -> Offspring:
        current_id = current_id or offspring.id
        if current_id != offspring.id and offspring.id in self.items:
            raise DuplicateOffspring(f"Offspring with ID '{offspring.id}' already exists")
        self.items.pop(current_id)
        self.items[offspring.id] = replace(offspring)
        return offspring

    async def delete(self, offspring_id: str) -> bool:
        return self.items.pop(offspring_id, None) is not None

    async def delete_by_litter(self, litter_id: str) -> int:
        doomed = [k for k, v in self.items.items() if v.litter_id == litter_id]
        for key in doomed:
            del self.items[key]
        return len(doomed)

    async def list_by_litter(self, litter_id: str) -> list[Offspring]:
        return sorted(
            (replace(x) for x in self.items.values() if x.litter_id == litter_id),
            key=lambda x: x.id,
        )

    async def list_by_litters(self, litter_ids) -> list[Offspring]:
        ids = set(litter_ids)
        return sorted(
            (replace(x) for x in self.items.values() if x.litter_id in ids),
            key=lambda x: x.id,
        )


class InMemoryReports:
    def __init__(self) -> None:
        self.items: dict[str, Report] = {}

    async def add(self, report: Report) -> Report:
        if any(r.name == report.name for r in self.items.values()):
            raise ReportNameConflict(f"A report with name '{report.name}' already exists")
        self.items[report.id] = replace(report)
        return report

    async def get_by_name(self, name: str) -> Report | None:
        for report in self.items.values():
            if report.name == name:
                return replace(report)
        return None

    async def list(self) -> list[Report]:
        return sorted((replace(r) for r in self.items.values()), key=lambda r: r.name)

    async def update(self, report: Report, *, expected_version: int) -> Report | None:
        stored = self.items.get(report.id)
        if stored is None or stored.version != expected_version:
            return None
        if any(r.name == report.name and r.id != report.id for r in self.items.values()):
            raise ReportNameConflict(f"A report with name '{report.name}' already exists")
        self.items[report.id] = replace(report)
        return report

    async def delete_by_name(self, name: str) -> bool:
        for key, report in list(self.items.items()):
            if report.name == name:
                del self.items[key]
                return True
        return False


def make_uow():
    commits: list[int] = []

    async def commit():
        commits.append(1)

    async def rollback():
        return None

    return SimpleNamespace(
        mothers=InMemoryMothers(),
        litters=InMemoryLitters(),
        offspring=InMemoryOffspring(),
        reports=InMemoryReports(),
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


@pytest.fixture()
def uow():
    return make_uow()
