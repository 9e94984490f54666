from __future__ import annotations

import logging

from herdline.application.errors import ConflictError, NotFound
from herdline.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, event_id: int) -> None:
    event = await uow.breeding_events.get(event_id)
    if not event:
        raise NotFound("Breeding event not found")
    if event.has_recorded_offspring:
        raise ConflictError("Cannot delete a breeding event with recorded offspring")
    deleted = await uow.breeding_events.delete(event_id)
    if not deleted:
        raise NotFound("Breeding event not found")
    await uow.commit()
    logger.info("Breeding event %s deleted", event.event_code)
