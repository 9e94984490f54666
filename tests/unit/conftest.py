from __future__ import annotations

import copy
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from herdline.domain.models.animal import Animal
from herdline.domain.models.breeding_event import BreedingEvent


class InMemoryAnimalRepository:
    def __init__(self) -> None:
        self.rows: dict[int, Animal] = {}
        self._next_id = 1

    async def add(self, animal: Animal) -> Animal:
        stored = copy.deepcopy(animal)
        stored.id = self._next_id
        self._next_id += 1
        self.rows[stored.id] = stored
        return copy.deepcopy(stored)

    async def get(self, animal_id):
        row = self.rows.get(animal_id)
        if row is None or row.deleted_at is not None:
            return None
        return copy.deepcopy(row)

    async def get_many(self, animal_ids):
        return [copy.deepcopy(self.rows[i]) for i in sorted(set(animal_ids)) if i in self.rows]

    def _filtered(self, species=None, gender=None, status=None, exclude_id=None):
        return [
            row
            for row in sorted(self.rows.values(), key=lambda a: a.id)
            if row.deleted_at is None
            and (species is None or row.species == species)
            and (gender is None or row.gender == gender)
            and (status is None or row.status == status)
            and (exclude_id is None or row.id != exclude_id)
        ]

    async def list(
        self, *, species=None, gender=None, status=None, exclude_id=None, limit=None, offset=0
    ):
        rows = self._filtered(species, gender, status, exclude_id)[offset:]
        if limit is not None:
            rows = rows[:limit]
        return [copy.deepcopy(row) for row in rows]

    async def count(self, *, species=None, gender=None, status=None):
        return len(self._filtered(species, gender, status))

    async def list_codes(self, species, prefix=None):
        return [
            row.animal_code
            for row in self.rows.values()
            if row.species == species and (prefix is None or row.animal_code.startswith(prefix))
        ]

    async def has_offspring(self, animal_id):
        return any(animal_id in row.parent_ids for row in self.rows.values())

    async def update(self, animal_id, data, expected_version):
        row = self.rows.get(animal_id)
        if row is None or row.deleted_at is not None or row.version != expected_version:
            return None
        for key, value in data.items():
            setattr(row, key, value)
        row.version = expected_version + 1
        return copy.deepcopy(row)

    async def delete(self, animal_id):
        row = self.rows.get(animal_id)
        if row is None or row.deleted_at is not None:
            return False
        row.deleted_at = datetime.now(timezone.utc)
        row.version += 1
        return True


class InMemoryBreedingEventsRepository:
    def __init__(self) -> None:
        self.rows: dict[int, BreedingEvent] = {}
        self._next_id = 1

    async def add(self, event: BreedingEvent) -> BreedingEvent:
        stored = copy.deepcopy(event)
        stored.id = self._next_id
        self._next_id += 1
        self.rows[stored.id] = stored
        return copy.deepcopy(stored)

    async def get(self, event_id):
        row = self.rows.get(event_id)
        if row is None or row.deleted_at is not None:
            return None
        return copy.deepcopy(row)

    def _filtered(self, animal_id=None, status=None, pair_code=None):
        rows = [
            row
            for row in self.rows.values()
            if row.deleted_at is None
            and (animal_id is None or animal_id in (row.male_id, row.female_id))
            and (status is None or row.status == status)
            and (pair_code is None or row.pair_code == pair_code)
        ]
        return sorted(rows, key=lambda e: (e.breeding_date, e.id), reverse=True)

    async def list(self, *, animal_id=None, status=None, pair_code=None, limit=None, offset=0):
        rows = self._filtered(animal_id, status, pair_code)[offset:]
        if limit is not None:
            rows = rows[:limit]
        return [copy.deepcopy(row) for row in rows]

    async def count(self, *, animal_id=None, status=None, pair_code=None):
        return len(self._filtered(animal_id, status, pair_code))

    async def update(self, event, expected_version):
        row = self.rows.get(event.id)
        if row is None or row.deleted_at is not None or row.version != expected_version:
            return None
        stored = copy.deepcopy(event)
        stored.version = expected_version + 1
        self.rows[event.id] = stored
        return copy.deepcopy(stored)

    async def delete(self, event_id):
        row = self.rows.get(event_id)
        if row is None or row.deleted_at is not None:
            return False
        row.deleted_at = datetime.now(timezone.utc)
        row.version += 1
        return True


def make_uow(animals=None, breeding_events=None):
    state = SimpleNamespace(commits=0, rollbacks=0)

    async def commit():
        state.commits += 1

    async def rollback():
        state.rollbacks += 1

    return SimpleNamespace(
        animals=animals or InMemoryAnimalRepository(),
        breeding_events=breeding_events or InMemoryBreedingEventsRepository(),
        commit=commit,
        rollback=rollback,
        state=state,
    )


@pytest.fixture()
def uow():
    return make_uow()


@pytest.fixture()
def add_animal(uow):
    """Store an animal directly, bypassing the create use case."""

    async def _add(code: str, gender: str, **kwargs) -> Animal:
        kwargs.setdefault("species", "rabbit")
        kwargs.setdefault("name", code)
        return await uow.animals.add(Animal.create(animal_code=code, gender=gender, **kwargs))

    return _add
