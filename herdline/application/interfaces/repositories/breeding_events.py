from __future__ import annotations

from typing import Protocol

from herdline.domain.models.breeding_event import BreedingEvent


class BreedingEventsRepository(Protocol):
    async def add(self, event: BreedingEvent) -> BreedingEvent: ...

    async def get(self, event_id: int) -> BreedingEvent | None: ...

    async def list(
        self,
        *,
        animal_id: int | None = None,
        status: str | None = None,
        pair_code: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[BreedingEvent]: ...

    async def count(
        self,
        *,
        animal_id: int | None = None,
        status: str | None = None,
        pair_code: str | None = None,
    ) -> int: ...

    async def update(
        self, event: BreedingEvent, expected_version: int
    ) -> BreedingEvent | None: ...

    async def delete(self, event_id: int) -> bool: ...
