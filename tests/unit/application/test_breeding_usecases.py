from __future__ import annotations

import logging
import random
from datetime import date

import pytest

from herdline.application.errors import ConflictError, InvalidGender, NotFound, ValidationError
from herdline.application.use_cases.breeding import (
    create_breeding_event,
    delete_breeding_event,
    get_breeding_event,
    list_breeding_events,
    record_birth,
    update_breeding_event,
)
from herdline.domain.services.offspring import OffspringGenerator
from herdline.domain.value_objects.species import MAX_LITTER_SIZE

BREEDING_DATE = date(2025, 3, 1)


@pytest.fixture()
async def pair(add_animal):
    buck = await add_animal("M1", "male", name="Buck")
    doe = await add_animal("F1", "female", name="Daisy")
    return buck, doe


@pytest.fixture()
def generator():
    return OffspringGenerator(random.Random(7))


async def plan(uow, male, female, **kwargs):
    return await create_breeding_event.execute(
        uow,
        create_breeding_event.CreateBreedingEventInput(
            male_id=male.id, female_id=female.id, breeding_date=BREEDING_DATE, **kwargs
        ),
    )


async def birth(uow, event, generator, count, on=date(2025, 4, 1)):
    return await record_birth.execute(
        uow,
        event.id,
        record_birth.RecordBirthInput(actual_birth_date=on, actual_offspring_count=count),
        generator=generator,
    )


@pytest.mark.asyncio
async def test_create_event_derives_codes_dates_and_predictions(uow, pair):
    buck, doe = pair
    event = await plan(uow, buck, doe)

    assert event.id is not None
    assert event.event_code == "BE-M1_F1-20250301"
    assert event.pair_code == "M1_F1"
    assert event.status == "pending"
    assert event.expected_birth_date == date(2025, 4, 1)
    assert event.nest_box_date == date(2025, 3, 29)
    assert event.genetic_compatibility_score == 90
    assert event.predicted_litter_size == 6
    assert event.predicted_offspring_health == 85
    assert event.predicted_roi == 108
    assert event.expected_offspring_count == 6
    assert event.offspring_ids == []


@pytest.mark.asyncio
async def test_create_event_keeps_supplied_values(uow, pair):
    buck, doe = pair
    event = await plan(
        uow,
        buck,
        doe,
        event_code="BE-001",
        expected_birth_date=date(2025, 4, 3),
        genetic_compatibility_score=75,
        predicted_litter_size=4,
        predicted_offspring_health=80,
        predicted_roi=50,
        expected_offspring_count=3,
    )
    assert event.event_code == "BE-001"
    assert event.expected_birth_date == date(2025, 4, 3)
    assert event.nest_box_date == date(2025, 3, 31)
    assert (event.genetic_compatibility_score, event.predicted_litter_size) == (75, 4)
    assert event.expected_offspring_count == 3


@pytest.mark.asyncio
async def test_create_event_rejects_swapped_genders(uow, pair):
    buck, doe = pair
    with pytest.raises(InvalidGender):
        await plan(uow, doe, buck)


@pytest.mark.asyncio
async def test_create_event_rejects_same_gender(uow, add_animal, pair):
    buck, _ = pair
    other = await add_animal("M2", "male")
    with pytest.raises(InvalidGender):
        await plan(uow, buck, other)


@pytest.mark.asyncio
async def test_create_event_rejects_cross_species(uow, add_animal, pair):
    buck, _ = pair
    nanny = await add_animal("F1", "female", species="goat")
    with pytest.raises(ValidationError):
        await plan(uow, buck, nanny)


@pytest.mark.asyncio
async def test_create_event_missing_partner(uow, pair):
    buck, doe = pair
    doe.id = 999
    with pytest.raises(NotFound):
        await plan(uow, buck, doe)


@pytest.mark.asyncio
async def test_risky_pair_is_recorded_with_penalty(uow, add_animal, pair, caplog):
    buck, doe = pair
    son = await add_animal("M2", "male", parent_male_id=buck.id, parent_female_id=doe.id)
    daughter = await add_animal("F2", "female", parent_male_id=buck.id, parent_female_id=doe.id)

    with caplog.at_level(logging.WARNING):
        event = await plan(uow, son, daughter)

    assert event.genetic_compatibility_score == 60
    assert "created despite risk: siblings" in caplog.text


@pytest.mark.asyncio
async def test_record_birth_creates_offspring(uow, pair, generator):
    buck, doe = pair
    event = await plan(uow, buck, doe)

    result = await birth(uow, event, generator, 5)

    assert len(result.offspring) == 5
    assert [c.animal_code for c in result.offspring] == [f"M1_F1_0{i}" for i in range(1, 6)]
    for child in result.offspring:
        assert child.id is not None
        assert child.parent_male_id == buck.id
        assert child.parent_female_id == doe.id
        assert child.generation == 1
        assert child.date_of_birth == date(2025, 4, 1)
        assert child.gender in {"male", "female"}
        assert 60 <= child.health <= 100

    recorded = result.event
    assert recorded.status == "birthed"
    assert recorded.actual_birth_date == date(2025, 4, 1)
    assert recorded.actual_offspring_count == 5
    assert recorded.offspring_count == 5
    assert recorded.offspring_ids == [c.id for c in result.offspring]
    assert recorded.actual_roi == 90
    assert recorded.wean_date == date(2025, 5, 27)
    assert recorded.version == event.version + 1

    assert (await uow.animals.get(buck.id)).offspring_count == 5
    assert (await uow.animals.get(doe.id)).offspring_count == 5


@pytest.mark.asyncio
async def test_record_birth_twice_conflicts(uow, pair, generator):
    buck, doe = pair
    event = await plan(uow, buck, doe)
    first = await birth(uow, event, generator, 5)
    herd_size = await uow.animals.count()

    with pytest.raises(ConflictError):
        await birth(uow, event, generator, 3)

    stored = await get_breeding_event.execute(uow, event.id)
    assert stored.offspring_ids == first.event.offspring_ids
    assert await uow.animals.count() == herd_size


@pytest.mark.asyncio
async def test_record_empty_litter(uow, pair, generator):
    buck, doe = pair
    event = await plan(uow, buck, doe)

    result = await birth(uow, event, generator, 0)

    assert result.offspring == []
    assert result.event.status == "birthed"
    assert result.event.actual_roi == 0
    assert (await uow.animals.get(doe.id)).offspring_count == 0


@pytest.mark.asyncio
async def test_second_litter_continues_numbering(uow, pair, generator):
    buck, doe = pair
    first_event = await plan(uow, buck, doe)
    await birth(uow, first_event, generator, 2)
    second_event = await plan(uow, buck, doe, event_code="BE-M1_F1-second")

    result = await birth(uow, second_event, generator, 2, on=date(2025, 4, 2))

    assert [c.animal_code for c in result.offspring] == ["M1_F1_03", "M1_F1_04"]
    assert (await uow.animals.get(buck.id)).offspring_count == 4


@pytest.mark.asyncio
async def test_record_birth_validates_input(uow, pair, generator):
    buck, doe = pair
    event = await plan(uow, buck, doe)
    with pytest.raises(ValidationError):
        await birth(uow, event, generator, -1)
    with pytest.raises(ValidationError):
        await birth(uow, event, generator, 2, on=date(2025, 2, 1))


@pytest.mark.asyncio
async def test_record_birth_rejects_oversized_litter(uow, pair, generator):
    buck, doe = pair
    event = await plan(uow, buck, doe)
    herd_size = await uow.animals.count()

    with pytest.raises(ValidationError):
        await birth(uow, event, generator, MAX_LITTER_SIZE + 1)

    assert await uow.animals.count() == herd_size
    assert (await get_breeding_event.execute(uow, event.id)).status == "pending"


@pytest.mark.asyncio
async def test_record_birth_accepts_largest_litter(uow, pair, generator):
    buck, doe = pair
    event = await plan(uow, buck, doe)
    result = await birth(uow, event, generator, MAX_LITTER_SIZE)
    assert len(result.offspring) == MAX_LITTER_SIZE


@pytest.mark.asyncio
async def test_record_birth_requires_pending_event(uow, pair, generator):
    buck, doe = pair
    event = await plan(uow, buck, doe)
    payload = update_breeding_event.UpdateBreedingEventInput(
        version=event.version, status="unsuccessful"
    )
    await update_breeding_event.execute(uow, event.id, payload)
    with pytest.raises(ConflictError):
        await birth(uow, event, generator, 4)


@pytest.mark.asyncio
async def test_record_birth_missing_event(uow, generator):
    payload = record_birth.RecordBirthInput(
        actual_birth_date=date(2025, 4, 1), actual_offspring_count=1
    )
    with pytest.raises(NotFound):
        await record_birth.execute(uow, 404, payload, generator=generator)


@pytest.mark.asyncio
async def test_record_birth_loses_race_on_stale_version(uow, pair, generator):
    buck, doe = pair
    event = await plan(uow, buck, doe)

    async def concurrent_update(event, expected_version):
        return None

    uow.breeding_events.update = concurrent_update
    commits = uow.state.commits

    with pytest.raises(ConflictError):
        await birth(uow, event, generator, 3)
    assert uow.state.commits == commits


@pytest.mark.asyncio
async def test_update_event_status_transitions(uow, pair):
    buck, doe = pair
    event = await plan(uow, buck, doe)

    updated = await update_breeding_event.execute(
        uow,
        event.id,
        update_breeding_event.UpdateBreedingEventInput(
            version=event.version, status="successful", success_rating=8
        ),
    )
    assert updated.status == "successful"
    assert updated.success_rating == 8
    assert updated.version == event.version + 1

    with pytest.raises(ConflictError):
        await update_breeding_event.execute(
            uow,
            event.id,
            update_breeding_event.UpdateBreedingEventInput(
                version=updated.version, status="unsuccessful"
            ),
        )


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["birthed", "weaned"])
async def test_update_event_rejects_status(uow, pair, status):
    buck, doe = pair
    event = await plan(uow, buck, doe)
    with pytest.raises(ValidationError):
        await update_breeding_event.execute(
            uow,
            event.id,
            update_breeding_event.UpdateBreedingEventInput(version=event.version, status=status),
        )


@pytest.mark.asyncio
async def test_update_event_version_mismatch(uow, pair):
    buck, doe = pair
    event = await plan(uow, buck, doe)
    with pytest.raises(ConflictError):
        await update_breeding_event.execute(
            uow,
            event.id,
            update_breeding_event.UpdateBreedingEventInput(version=event.version + 3, notes="x"),
        )


@pytest.mark.asyncio
async def test_delete_pending_event(uow, pair):
    buck, doe = pair
    event = await plan(uow, buck, doe)
    await delete_breeding_event.execute(uow, event.id)
    with pytest.raises(NotFound):
        await get_breeding_event.execute(uow, event.id)


@pytest.mark.asyncio
async def test_delete_event_with_offspring_conflicts(uow, pair, generator):
    buck, doe = pair
    event = await plan(uow, buck, doe)
    await birth(uow, event, generator, 2)
    with pytest.raises(ConflictError):
        await delete_breeding_event.execute(uow, event.id)


@pytest.mark.asyncio
async def test_list_events_filters(uow, add_animal, pair):
    buck, doe = pair
    other = await add_animal("F2", "female")
    await plan(uow, buck, doe)
    await plan(uow, buck, other)

    for_doe = await list_breeding_events.execute(uow, animal_id=doe.id)
    for_buck = await list_breeding_events.execute(uow, animal_id=buck.id)

    assert for_doe.total == 1
    assert for_doe.items[0].pair_code == "M1_F1"
    assert for_buck.total == 2
    with pytest.raises(ValidationError):
        await list_breeding_events.execute(uow, status="weaned")
