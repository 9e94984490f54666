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
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from herdline.infrastructure.db.base import Base
from herdline.infrastructure.db.types import ListOf


class AnimalORM(Base):
    __tablename__ = "animals"
    __table_args__ = (
        UniqueConstraint("species", "animal_code", name="ux_animals_species_code"),
        Index("ix_animals_species_gender_status", "species", "gender", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    animal_code: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    species: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    gender: Mapped[str] = mapped_column(String(6), nullable=False)
    breed: Mapped[str | None] = mapped_column(String(255), nullable=True)
    breed_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    secondary_breed_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_mixed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    mix_ratio: Mapped[str | None] = mapped_column(String(64), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    color: Mapped[str | None] = mapped_column(String(64), nullable=True)
    markings: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Genealogy fields
    parent_male_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("animals.id"), nullable=True, index=True
    )
    parent_female_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("animals.id"), nullable=True, index=True
    )
    generation: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    ancestry: Mapped[list[str]] = mapped_column(ListOf(String), nullable=False, default=list)
    pedigree_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Performance traits
    health: Mapped[int | None] = mapped_column(Integer, nullable=True)
    fertility: Mapped[int | None] = mapped_column(Integer, nullable=True)
    growth_rate: Mapped[int | None] = mapped_column(Integer, nullable=True)
    litter_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    offspring_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[list[str]] = mapped_column(ListOf(String), nullable=False, default=list)

    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
