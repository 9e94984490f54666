from __future__ import annotations

from herdline.application.errors import NotFound
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.domain.models.breeding_event import BreedingEvent


async def execute(uow: UnitOfWork, event_id: int) -> BreedingEvent:
    event = await uow.breeding_events.get(event_id)
    if not event:
        raise NotFound("Breeding event not found")
    return event
