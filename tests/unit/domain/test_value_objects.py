from __future__ import annotations

import pytest

from herdline.domain.value_objects import species
from herdline.domain.value_objects.breeding_status import BreedingEventStatus
from herdline.domain.value_objects.gender import Gender


def test_gender_opposite():
    assert Gender.MALE.opposite() is Gender.FEMALE
    assert Gender.FEMALE.opposite() is Gender.MALE


@pytest.mark.parametrize(
    "target",
    [
        BreedingEventStatus.SUCCESSFUL,
        BreedingEventStatus.UNSUCCESSFUL,
        BreedingEventStatus.BIRTHED,
    ],
)
def test_pending_moves_to_any_final_status(target):
    assert BreedingEventStatus.PENDING.can_transition_to(target)
    assert target.is_terminal


@pytest.mark.parametrize(
    "current",
    [
        BreedingEventStatus.SUCCESSFUL,
        BreedingEventStatus.UNSUCCESSFUL,
        BreedingEventStatus.BIRTHED,
    ],
)
def test_final_statuses_do_not_move(current):
    for target in BreedingEventStatus:
        assert not current.can_transition_to(target)


def test_pending_cannot_stay_pending():
    assert not BreedingEventStatus.PENDING.can_transition_to(BreedingEventStatus.PENDING)


@pytest.mark.parametrize(
    ("name", "days"),
    [("rabbit", 31), ("Goat", 150), ("chicken", 21), ("duck", 28), ("alpaca", 30), (None, 30)],
)
def test_gestation_days(name, days):
    assert species.gestation_days(name) == days


@pytest.mark.parametrize(
    ("name", "litter", "value"),
    [
        ("rabbit", 6, 30),
        ("goat", 2, 200),
        ("chicken", 8, 5),
        ("duck", 10, 7),
        ("alpaca", 6, 25),
    ],
)
def test_species_tables(name, litter, value):
    assert species.base_litter_size(name) == litter
    assert species.value_per_offspring(name) == value


def test_species_fallbacks():
    assert species.base_litter_size("rabbit") == 6
    assert species.base_litter_size("unknown") == species.DEFAULT_BASE_LITTER_SIZE
    assert species.value_per_offspring("rabbit") == 30
    assert species.male_ratio("rabbit") == 0.45
    assert species.male_ratio("goat") == 0.5
