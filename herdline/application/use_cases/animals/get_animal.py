from __future__ import annotations

from herdline.application.errors import NotFound
from herdline.application.interfaces.unit_of_work import UnitOfWork
from herdline.domain.models.animal import Animal


async def execute(uow: UnitOfWork, animal_id: int) -> Animal:
    animal = await uow.animals.get(animal_id)
    if not animal:
        raise NotFound("Animal not found")
    return animal
