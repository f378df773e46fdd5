from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class LitterORM(Base):
    __tablename__ = "litters"
    __table_args__ = (
        UniqueConstraint(
            "mother_id", "father_id", "birth_date", name="ux_litters_mother_father_birth"
        ),
    )

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    # No foreign key: removing a mother leaves her litters in place.
    mother_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Unknown fathers are stored as the UNKNOWN_FATHER sentinel, never NULL,
    # so the unique constraint also covers them.
    father_id: Mapped[str] = mapped_column(String(255), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    reported_litter_size: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
