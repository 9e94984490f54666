from __future__ import annotations

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from herdline.application.errors import ConflictError, InfrastructureError
from herdline.application.interfaces.repositories.breeding_events import (
    BreedingEventsRepository,
)
from herdline.domain.models.breeding_event import BreedingEvent
from herdline.infrastructure.db.orm.breeding_event import BreedingEventORM

# Identity and creation columns never change after insert
_IMMUTABLE = ("event_code", "pair_code", "male_id", "female_id", "breeding_date", "created_at")
_MUTABLE = (
    "status",
    "nest_box_date",
    "expected_birth_date",
    "actual_birth_date",
    "wean_date",
    "success_rating",
    "was_planned",
    "breeding_purpose",
    "male_weight",
    "female_weight",
    "genetic_compatibility_score",
    "predicted_litter_size",
    "predicted_offspring_health",
    "predicted_roi",
    "expected_offspring_count",
    "actual_offspring_count",
    "offspring_count",
    "offspring_ids",
    "actual_roi",
    "notes",
    "tags",
    "deleted_at",
    "updated_at",
    "version",
)


class BreedingEventsSQLAlchemyRepository(BreedingEventsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingEventORM) -> BreedingEvent:
        return BreedingEvent(
            id=orm.id,
            **{name: getattr(orm, name) for name in (*_IMMUTABLE, *_MUTABLE)},
        )

    def _filtered(self, stmt, *, animal_id=None, status=None, pair_code=None):
        stmt = stmt.where(BreedingEventORM.deleted_at.is_(None))
        if animal_id is not None:
            stmt = stmt.where(
                or_(BreedingEventORM.male_id == animal_id, BreedingEventORM.female_id == animal_id)
            )
        if status is not None:
            stmt = stmt.where(BreedingEventORM.status == status)
        if pair_code is not None:
            stmt = stmt.where(BreedingEventORM.pair_code == pair_code)
        return stmt

    async def add(self, event: BreedingEvent) -> BreedingEvent:
        orm = BreedingEventORM(**{name: getattr(event, name) for name in (*_IMMUTABLE, *_MUTABLE)})
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(f"Breeding event {event.event_code} already exists") from exc
        event.id = orm.id
        return self._to_domain(orm)

    async def get(self, event_id: int) -> BreedingEvent | None:
        stmt = (
            select(BreedingEventORM)
            .where(BreedingEventORM.id == event_id)
            .where(BreedingEventORM.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        animal_id: int | None = None,
        status: str | None = None,
        pair_code: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[BreedingEvent]:
        stmt = self._filtered(
            select(BreedingEventORM), animal_id=animal_id, status=status, pair_code=pair_code
        )
        stmt = stmt.order_by(BreedingEventORM.breeding_date.desc(), BreedingEventORM.id.desc())
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count(
        self,
        *,
        animal_id: int | None = None,
        status: str | None = None,
        pair_code: str | None = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count()).select_from(BreedingEventORM),
            animal_id=animal_id,
            status=status,
            pair_code=pair_code,
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def update(self, event: BreedingEvent, expected_version: int) -> BreedingEvent | None:
        values = {name: getattr(event, name) for name in _MUTABLE}
        values["version"] = expected_version + 1
        stmt = (
            update(BreedingEventORM)
            .where(BreedingEventORM.id == event.id)
            .where(BreedingEventORM.version == expected_version)
            .where(BreedingEventORM.deleted_at.is_(None))
            .values(**values)
            .returning(BreedingEventORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update breeding event") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def delete(self, event_id: int) -> bool:
        stmt = (
            update(BreedingEventORM)
            .where(BreedingEventORM.id == event_id)
            .where(BreedingEventORM.deleted_at.is_(None))
            .values(deleted_at=func.now(), version=BreedingEventORM.version + 1)
            .returning(BreedingEventORM.id)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete breeding event") from exc
        return result.scalar_one_or_none() is not None
