from __future__ import annotations

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession


def insert_for(session: AsyncSession, entity):
    """Dialect-specific INSERT so callers can use ON CONFLICT DO NOTHING.

    Only PostgreSQL (deployment) and SQLite (tests) are supported.
    """
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(entity)
    if dialect == "sqlite":
        return sqlite.insert(entity)
    raise NotImplementedError(f"Insert-if-absent is not supported for dialect '{dialect}'")
