from __future__ import annotations

from dataclasses import dataclass

from herdline.application.errors import ValidationError
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.domain.models.breeding_event import BreedingEvent
from herdline.domain.value_objects.breeding_status import BreedingEventStatus


@dataclass(slots=True)
class ListBreedingEventsResult:
    items: list[BreedingEvent]
    total: int


async def execute(
    uow: UnitOfWork,
    *,
    limit: int = 50,
    offset: int = 0,
    animal_id: int | None = None,
    status: str | None = None,
    pair_code: str | None = None,
) -> ListBreedingEventsResult:
    if limit <= 0 or limit > 100:
        raise ValidationError("limit must be between 1 and 100")
    if offset < 0:
        raise ValidationError("offset must be zero or positive")
    if status is not None and status not in {s.value for s in BreedingEventStatus}:
        raise ValidationError(f"Unknown breeding event status '{status}'")
    filters = {"animal_id": animal_id, "status": status, "pair_code": pair_code}
    items = await uow.breeding_events.list(limit=limit, offset=offset, **filters)
    total = await uow.breeding_events.count(**filters)
    return ListBreedingEventsResult(items=items, total=total)
