from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from herdline.application.errors import ConflictError, InfrastructureError
from herdline.application.interfaces.repositories.animals import AnimalRepository
from herdline.domain.models.animal import Animal
from herdline.infrastructure.db.orm.animal import AnimalORM

_COLUMNS = (
    "animal_code",
    "name",
    "species",
    "gender",
    "breed",
    "breed_id",
    "secondary_breed_id",
    "is_mixed",
    "mix_ratio",
    "date_of_birth",
    "weight",
    "color",
    "markings",
    "parent_male_id",
    "parent_female_id",
    "generation",
    "ancestry",
    "pedigree_level",
    "health",
    "fertility",
    "growth_rate",
    "litter_size",
    "offspring_count",
    "status",
    "notes",
    "tags",
    "deleted_at",
    "created_at",
    "updated_at",
    "version",
)


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            **{name: getattr(orm, name) for name in _COLUMNS},
        )

    def _filtered(self, stmt, *, species=None, gender=None, status=None):
        stmt = stmt.where(AnimalORM.deleted_at.is_(None))
        if species is not None:
            stmt = stmt.where(AnimalORM.species == species)
        if gender is not None:
            stmt = stmt.where(AnimalORM.gender == gender)
        if status is not None:
            stmt = stmt.where(AnimalORM.status == status)
        return stmt

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(**{name: getattr(animal, name) for name in _COLUMNS})
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                f"Animal code {animal.animal_code} already exists for {animal.species}"
            ) from exc
        animal.id = orm.id
        return self._to_domain(orm)

    async def get(self, animal_id: int) -> Animal | None:
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_many(self, animal_ids: Iterable[int]) -> list[Animal]:
        # Lineage is historical: soft-deleted ancestors are still returned
        ids = list(animal_ids)
        if not ids:
            return []
        stmt = select(AnimalORM).where(AnimalORM.id.in_(ids)).order_by(AnimalORM.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list(
        self,
        *,
        species: str | None = None,
        gender: str | None = None,
        status: str | None = None,
        exclude_id: int | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Animal]:
        stmt = self._filtered(select(AnimalORM), species=species, gender=gender, status=status)
        if exclude_id is not None:
            stmt = stmt.where(AnimalORM.id != exclude_id)
        stmt = stmt.order_by(AnimalORM.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count(
        self,
        *,
        species: str | None = None,
        gender: str | None = None,
        status: str | None = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count()).select_from(AnimalORM),
            species=species,
            gender=gender,
            status=status,
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def list_codes(self, species: str, prefix: str | None = None) -> list[str]:
        # Includes soft-deleted rows: their codes stay reserved by the unique constraint
        stmt = select(AnimalORM.animal_code).where(AnimalORM.species == species)
        if prefix:
            stmt = stmt.where(AnimalORM.animal_code.startswith(prefix))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def has_offspring(self, animal_id: int) -> bool:
        stmt = (
            select(func.count())
            .select_from(AnimalORM)
            .where(
                or_(AnimalORM.parent_male_id == animal_id, AnimalORM.parent_female_id == animal_id)
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one()) > 0

    async def update(self, animal_id: int, data: dict, expected_version: int) -> Animal | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.version == expected_version)
            .where(AnimalORM.deleted_at.is_(None))
            .values(**values)
            .returning(AnimalORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def delete(self, animal_id: int) -> bool:
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.deleted_at.is_(None))
            .values(deleted_at=func.now(), version=AnimalORM.version + 1)
            .returning(AnimalORM.id)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete animal") from exc
        return result.scalar_one_or_none() is not None
