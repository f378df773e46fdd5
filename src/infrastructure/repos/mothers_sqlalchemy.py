from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import DuplicateMother
from src.application.interfaces.repositories.mothers import MothersRepository
from src.domain.models.mother import Mother
from src.infrastructure.db.dialect import insert_for
from src.infrastructure.db.orm.mother import MotherORM


class MothersSQLAlchemyRepository(MothersRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MotherORM) -> Mother:
        return Mother(id=orm.id, notes=orm.notes, created_at=orm.created_at)

    async def _insert_if_absent(self, mother: Mother) -> bool:
        stmt = (
            insert_for(self.session, MotherORM)
            .values(id=mother.id, notes=mother.notes, created_at=mother.created_at)
            .on_conflict_do_nothing(index_elements=["id"])
            .returning(MotherORM.id)
        )
        res = await self.session.execute(stmt)
        return res.scalar_one_or_none() is not None

    async def add(self, mother: Mother) -> Mother:
        if not await self._insert_if_absent(mother):
            raise DuplicateMother(f"Mother with ID '{mother.id}' already exists")
        return mother

    async def ensure(self, mother_id: str) -> bool:
        return await self._insert_if_absent(Mother.create(mother_id))

    async def get(self, mother_id: str) -> Mother | None:
        res = await self.session.execute(select(MotherORM).where(MotherORM.id == mother_id))
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def existing_ids(self, mother_ids: Iterable[str]) -> set[str]:
        ids = set(mother_ids)
        if not ids:
            return set()
        res = await self.session.execute(select(MotherORM.id).where(MotherORM.id.in_(ids)))
        return set(res.scalars().all())

    async def list(self) -> list[Mother]:
        res = await self.session.execute(select(MotherORM).order_by(MotherORM.id))
        return [self._to_domain(x) for x in res.scalars().all()]

    async def delete(self, mother_id: str) -> bool:
        res = await self.session.execute(
            delete(MotherORM).where(MotherORM.id == mother_id).returning(MotherORM.id)
        )
        return res.scalar_one_or_none() is not None
