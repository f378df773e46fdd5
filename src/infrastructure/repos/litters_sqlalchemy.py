from __future__ import annotations

from datetime import date

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, DuplicateLitter
from src.application.interfaces.repositories.litters import LittersRepository
from src.domain.models.litter import Litter
from src.domain.value_objects.father import FatherRef
from src.infrastructure.db.dialect import insert_for
from src.infrastructure.db.orm.litter import LitterORM


class LittersSQLAlchemyRepository(LittersRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: LitterORM) -> Litter:
        return Litter(
            id=orm.id,
            mother_id=orm.mother_id,
            father=FatherRef(orm.father_id),
            birth_date=orm.birth_date,
            reported_litter_size=orm.reported_litter_size,
            notes=orm.notes,
            created_at=orm.created_at,
        )

    def _values(self, litter: Litter) -> dict:
        return {
            "mother_id": litter.mother_id,
            "father_id": litter.father.value,
            "birth_date": litter.birth_date,
            "reported_litter_size": litter.reported_litter_size,
            "notes": litter.notes,
        }

    async def add(self, litter: Litter) -> Litter:
        # Conflicts on either the primary key or the identity triple are skipped
        stmt = (
            insert_for(self.session, LitterORM)
            .values(id=litter.id, created_at=litter.created_at, **self._values(litter))
            .on_conflict_do_nothing()
            .returning(LitterORM.id)
        )
        res = await self.session.execute(stmt)
        if res.scalar_one_or_none() is not None:
            return litter
        if await self.find_by_identity(litter.mother_id, litter.father, litter.birth_date):
            raise DuplicateLitter(f"A litter with {litter.describe()} already exists")
        raise ConflictError(f"Litter with ID '{litter.id}' already exists")

    async def get(self, litter_id: str) -> Litter | None:
        res = await self.session.execute(select(LitterORM).where(LitterORM.id == litter_id))
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def find_by_identity(
        self, mother_id: str, father: FatherRef, birth_date: date
    ) -> Litter | None:
        stmt = select(LitterORM).where(
            LitterORM.mother_id == mother_id,
            LitterORM.father_id == father.value,
            LitterORM.birth_date == birth_date,
        )
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, litter: Litter) -> Litter:
        stmt = (
            update(LitterORM)
            .where(LitterORM.id == litter.id)
            .values(**self._values(litter))
            .returning(LitterORM)
        )
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateLitter(f"A litter with {litter.describe()} already exists") from exc
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else litter

    async def delete(self, litter_id: str) -> bool:
        res = await self.session.execute(
            delete(LitterORM).where(LitterORM.id == litter_id).returning(LitterORM.id)
        )
        return res.scalar_one_or_none() is not None

    async def list_by_mother(
        self,
        mother_id: str,
        *,
        born_from: date | None = None,
        born_to: date | None = None,
    ) -> list[Litter]:
        stmt = select(LitterORM).where(LitterORM.mother_id == mother_id)
        if born_from is not None:
            stmt = stmt.where(LitterORM.birth_date >= born_from)
        if born_to is not None:
            stmt = stmt.where(LitterORM.birth_date <= born_to)
        stmt = stmt.order_by(LitterORM.birth_date, LitterORM.id)
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]
