from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import DuplicateOffspring, OffspringNotFound
from src.application.interfaces.repositories.offspring import OffspringRepository
from src.domain.models.offspring import Offspring
from src.domain.value_objects.sex import OffspringSex
from src.infrastructure.db.dialect import insert_for
from src.infrastructure.db.orm.offspring import OffspringORM

offspring_table = OffspringORM.__table__


class OffspringSQLAlchemyRepository(OffspringRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, row) -> Offspring:
        return Offspring(
            id=row.id,
            litter_id=row.litter_id,
            sex=OffspringSex(row.sex),
            is_alive=row.is_alive,
            is_weaned=row.is_weaned,
            notes=row.notes,
            created_at=row.created_at,
        )

    def _values(self, offspring: Offspring) -> dict:
        return {
            "litter_id": offspring.litter_id,
            "sex": offspring.sex.value,
            "is_alive": offspring.is_alive,
            "is_weaned": offspring.is_weaned,
            "notes": offspring.notes,
        }

    async def add(self, offspring: Offspring) -> Offspring:
        stmt = (
            insert_for(self.session, OffspringORM)
            .values(id=offspring.id, created_at=offspring.created_at, **self._values(offspring))
            .on_conflict_do_nothing(index_elements=["id"])
            .returning(OffspringORM.id)
        )
        res = await self.session.execute(stmt)
        if res.scalar_one_or_none() is None:
            raise DuplicateOffspring(f"Offspring with ID '{offspring.id}' already exists")
        return offspring

    async def get(self, offspring_id: str) -> Offspring | None:
        res = await self.session.execute(
            select(OffspringORM).where(OffspringORM.id == offspring_id)
        )
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, offspring: Offspring, *, current_id: str | None = None) -> Offspring:
        current_id = current_id or offspring.id
        # Table-level statement: the primary key may change on rename.
        stmt = (
            update(offspring_table)
            .where(offspring_table.c.id == current_id)
            .values(id=offspring.id, **self._values(offspring))
            .returning(*offspring_table.c)
        )
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateOffspring(
                f"Offspring with ID '{offspring.id}' already exists. Cannot rename."
            ) from exc
        row = res.one_or_none()
        if row is None:
            raise OffspringNotFound(f"Offspring with ID '{current_id}' not found")
        return self._to_domain(row)

    async def delete(self, offspring_id: str) -> bool:
        res = await self.session.execute(
            delete(OffspringORM).where(OffspringORM.id == offspring_id).returning(OffspringORM.id)
        )
        return res.scalar_one_or_none() is not None

    async def delete_by_litter(self, litter_id: str) -> int:
        res = await self.session.execute(
            delete(OffspringORM)
            .where(OffspringORM.litter_id == litter_id)
            .returning(OffspringORM.id)
        )
        return len(res.scalars().all())

    async def list_by_litter(self, litter_id: str) -> list[Offspring]:
        stmt = (
            select(OffspringORM)
            .where(OffspringORM.litter_id == litter_id)
            .order_by(OffspringORM.id)
        )
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]

    async def list_by_litters(self, litter_ids: Iterable[str]) -> list[Offspring]:
        ids = list(dict.fromkeys(litter_ids))
        if not ids:
            return []
        stmt = (
            select(OffspringORM)
            .where(OffspringORM.litter_id.in_(ids))
            .order_by(OffspringORM.id)
        )
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]
