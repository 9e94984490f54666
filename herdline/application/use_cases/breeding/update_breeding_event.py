from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from herdline.application.errors import ConflictError, NotFound, ValidationError
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.domain.models.breeding_event import BreedingEvent
from herdline.domain.value_objects.breeding_status import BreedingEventStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateBreedingEventInput:
    version: int
    status: str | None = None
    nest_box_date: date | None = None
    wean_date: date | None = None
    success_rating: int | None = None
    was_planned: bool | None = None
    breeding_purpose: str | None = None
    male_weight: float | None = None
    female_weight: float | None = None
    notes: str | None = None
    tags: list[str] | None = None


UPDATABLE_FIELDS = (
    "nest_box_date",
    "wean_date",
    "success_rating",
    "was_planned",
    "breeding_purpose",
    "male_weight",
    "female_weight",
    "notes",
    "tags",
)


def _target_status(value: str, current: str) -> BreedingEventStatus:
    try:
        target = BreedingEventStatus(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown breeding event status '{value}'") from exc
    if target is BreedingEventStatus.BIRTHED:
        raise ValidationError("Use birth recording to mark an event as birthed")
    if not BreedingEventStatus(current).can_transition_to(target):
        raise ConflictError(f"Cannot change status from '{current}' to '{target.value}'")
    return target


async def execute(
    uow: UnitOfWork, event_id: int, payload: UpdateBreedingEventInput
) -> BreedingEvent:
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    event = await uow.breeding_events.get(event_id)
    if not event:
        raise NotFound("Breeding event not found")

    expected_version = event.version
    if payload.version != expected_version:
        raise ConflictError("Version mismatch while updating breeding event")

    changed = False
    if payload.status is not None and payload.status != event.status:
        event.status = _target_status(payload.status, event.status).value
        changed = True
    for field_name in UPDATABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            setattr(event, field_name, value)
            changed = True
    if not changed:
        return event

    event.bump_version()
    updated = await uow.breeding_events.update(event, expected_version=expected_version)
    if not updated:
        raise ConflictError("Version mismatch while updating breeding event")
    await uow.commit()
    logger.info("Breeding event %s updated (status %s)", updated.event_code, updated.status)
    return updated
