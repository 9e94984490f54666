from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from herdline.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, animal_id: int) -> Animal | None: ...

    async def get_many(self, animal_ids: Iterable[int]) -> list[Animal]: ...

    async def list(
        self,
        *,
        species: str | None = None,
        gender: str | None = None,
        status: str | None = None,
        exclude_id: int | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Animal]: ...

    async def count(
        self,
        *,
        species: str | None = None,
        gender: str | None = None,
        status: str | None = None,
    ) -> int: ...

    async def list_codes(self, species: str, prefix: str | None = None) -> list[str]: ...

    async def has_offspring(self, animal_id: int) -> bool: ...

    async def update(self, animal_id: int, data: dict, expected_version: int) -> Animal | None: ...

    async def delete(self, animal_id: int) -> bool: ...
