from __future__ import annotations

from typing import Protocol

from herdline.application.interfaces.repositories.animals import AnimalRepository
from herdline.application.interfaces.repositories.breeding_events import (
    BreedingEventsRepository,
)


class UnitOfWork(Protocol):
    animals: AnimalRepository
    breeding_events: BreedingEventsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
