from __future__ import annotations

from dataclasses import dataclass

from herdline.application.errors import ValidationError
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.domain.models.animal import Animal


@dataclass(slots=True)
class ListAnimalsResult:
    items: list[Animal]
    total: int


async def execute(
    uow: UnitOfWork,
    *,
    limit: int,
    offset: int = 0,
    species: str | None = None,
    gender: str | None = None,
    status: str | None = None,
) -> ListAnimalsResult:
    if limit <= 0 or limit > 100:
        raise ValidationError("limit must be between 1 and 100")
    if offset < 0:
        raise ValidationError("offset must be zero or positive")
    species = species.strip().lower() if species else None
    items = await uow.animals.list(
        species=species, gender=gender, status=status, limit=limit, offset=offset
    )
    total = await uow.animals.count(species=species, gender=gender, status=status)
    return ListAnimalsResult(items=items, total=total)
