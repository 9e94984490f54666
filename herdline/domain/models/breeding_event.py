from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone

from herdline.domain.value_objects import species as species_constants
from herdline.domain.value_objects.breeding_status import BreedingEventStatus


@dataclass(slots=True)
class BreedingEvent:
    id: int | None
    event_code: str
    pair_code: str
    male_id: int
    female_id: int
    breeding_date: date
    status: str = BreedingEventStatus.PENDING.value

    nest_box_date: date | None = None
    expected_birth_date: date | None = None
    actual_birth_date: date | None = None
    wean_date: date | None = None

    success_rating: int | None = None
    was_planned: bool = True
    breeding_purpose: str = "commercial"
    male_weight: float | None = None
    female_weight: float | None = None

    # Predicted at creation and never recomputed
    genetic_compatibility_score: int | None = None
    predicted_litter_size: int | None = None
    predicted_offspring_health: int | None = None
    predicted_roi: int | None = None
    expected_offspring_count: int | None = None

    # Filled in once by birth recording
    actual_offspring_count: int | None = None
    offspring_count: int = 0
    offspring_ids: list[int] = field(default_factory=list)
    actual_roi: int | None = None

    notes: str | None = None
    tags: list[str] = field(default_factory=list)

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        event_code: str,
        pair_code: str,
        male_id: int,
        female_id: int,
        breeding_date: date,
        species: str | None = None,
        expected_birth_date: date | None = None,
        nest_box_date: date | None = None,
        was_planned: bool = True,
        breeding_purpose: str = "commercial",
        male_weight: float | None = None,
        female_weight: float | None = None,
        genetic_compatibility_score: int | None = None,
        predicted_litter_size: int | None = None,
        predicted_offspring_health: int | None = None,
        predicted_roi: int | None = None,
        expected_offspring_count: int | None = None,
        notes: str | None = None,
        tags: list[str] | None = None,
    ) -> BreedingEvent:
        now = datetime.now(timezone.utc)
        if expected_birth_date is None:
            expected_birth_date = breeding_date + timedelta(
                days=species_constants.gestation_days(species)
            )
        if nest_box_date is None:
            nest_box_date = expected_birth_date - timedelta(
                days=species_constants.NEST_BOX_LEAD_DAYS
            )
        return cls(
            id=None,
            event_code=event_code,
            pair_code=pair_code,
            male_id=male_id,
            female_id=female_id,
            breeding_date=breeding_date,
            status=BreedingEventStatus.PENDING.value,
            nest_box_date=nest_box_date,
            expected_birth_date=expected_birth_date,
            was_planned=was_planned,
            breeding_purpose=breeding_purpose,
            male_weight=male_weight,
            female_weight=female_weight,
            genetic_compatibility_score=genetic_compatibility_score,
            predicted_litter_size=predicted_litter_size,
            predicted_offspring_health=predicted_offspring_health,
            predicted_roi=predicted_roi,
            expected_offspring_count=expected_offspring_count,
            notes=notes,
            tags=list(tags or []),
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def has_recorded_offspring(self) -> bool:
        return (
            self.actual_birth_date is not None
            and self.offspring_count is not None
            and self.offspring_count > 0
        )

    def record_birth(
        self,
        actual_birth_date: date,
        offspring_ids: list[int],
        actual_roi: int | None,
        wean_date: date | None = None,
    ) -> None:
        self.actual_birth_date = actual_birth_date
        self.actual_offspring_count = len(offspring_ids)
        self.offspring_count = len(offspring_ids)
        self.offspring_ids = list(offspring_ids)
        self.actual_roi = actual_roi
        if wean_date is not None:
            self.wean_date = wean_date
        elif self.wean_date is None:
            self.wean_date = actual_birth_date + timedelta(days=species_constants.WEAN_DAYS)
        self.status = BreedingEventStatus.BIRTHED.value
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
