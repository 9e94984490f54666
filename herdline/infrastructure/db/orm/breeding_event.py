from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from herdline.infrastructure.db.base import Base
from herdline.infrastructure.db.types import ListOf


class BreedingEventORM(Base):
    __tablename__ = "breeding_events"
    __table_args__ = (
        Index("ix_breeding_events_male", "male_id"),
        Index("ix_breeding_events_female", "female_id"),
        Index("ix_breeding_events_pair", "pair_code"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_code: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    pair_code: Mapped[str] = mapped_column(String(128), nullable=False)
    male_id: Mapped[int] = mapped_column(Integer, ForeignKey("animals.id"), nullable=False)
    female_id: Mapped[int] = mapped_column(Integer, ForeignKey("animals.id"), nullable=False)

    breeding_date: Mapped[date] = mapped_column(Date, nullable=False)
    nest_box_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    expected_birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    actual_birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    wean_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    status: Mapped[str] = mapped_column(String(16), nullable=False, default="pending")
    success_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    was_planned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    breeding_purpose: Mapped[str] = mapped_column(
        String(32), nullable=False, default="commercial"
    )
    male_weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    female_weight: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Predictive metrics
    genetic_compatibility_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    predicted_litter_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    predicted_offspring_health: Mapped[int | None] = mapped_column(Integer, nullable=True)
    predicted_roi: Mapped[int | None] = mapped_column(Integer, nullable=True)
    expected_offspring_count: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Outcome
    actual_offspring_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    offspring_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    offspring_ids: Mapped[list[int]] = mapped_column(
        ListOf(Integer), nullable=False, default=list
    )
    actual_roi: Mapped[int | None] = mapped_column(Integer, nullable=True)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[list[str]] = mapped_column(ListOf(String), nullable=False, default=list)

    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
