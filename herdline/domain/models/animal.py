from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from herdline.domain.value_objects.animal_status import AnimalStatus

DEFAULT_TRAIT_SCORE = 85


@dataclass(slots=True)
class Animal:
    id: int | None
    animal_code: str
    name: str
    species: str
    gender: str
    breed: str | None = None
    breed_id: int | None = None
    secondary_breed_id: int | None = None
    is_mixed: bool = False
    mix_ratio: str | None = None
    date_of_birth: date | None = None
    weight: float | None = None
    color: str | None = None
    markings: str | None = None

    # Lineage; parent references are descends-from edges, never ownership
    parent_male_id: int | None = None
    parent_female_id: int | None = None
    generation: int = 0
    ancestry: list[str] = field(default_factory=list)
    pedigree_level: int = 0

    # Performance traits (0-100)
    health: int | None = DEFAULT_TRAIT_SCORE
    fertility: int | None = DEFAULT_TRAIT_SCORE
    growth_rate: int | None = DEFAULT_TRAIT_SCORE
    litter_size: int | None = None
    offspring_count: int = 0

    status: str = AnimalStatus.ACTIVE.value
    notes: str | None = None
    tags: list[str] = field(default_factory=list)

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        animal_code: str,
        name: str,
        species: str,
        gender: str,
        breed: str | None = None,
        breed_id: int | None = None,
        secondary_breed_id: int | None = None,
        is_mixed: bool = False,
        mix_ratio: str | None = None,
        date_of_birth: date | None = None,
        weight: float | None = None,
        color: str | None = None,
        markings: str | None = None,
        parent_male_id: int | None = None,
        parent_female_id: int | None = None,
        generation: int = 0,
        ancestry: list[str] | None = None,
        pedigree_level: int = 0,
        health: int | None = DEFAULT_TRAIT_SCORE,
        fertility: int | None = DEFAULT_TRAIT_SCORE,
        growth_rate: int | None = DEFAULT_TRAIT_SCORE,
        litter_size: int | None = None,
        status: str = AnimalStatus.ACTIVE.value,
        notes: str | None = None,
        tags: list[str] | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=None,
            animal_code=animal_code,
            name=name,
            species=species.strip().lower(),
            gender=gender,
            breed=breed,
            breed_id=breed_id,
            secondary_breed_id=secondary_breed_id,
            is_mixed=is_mixed,
            mix_ratio=mix_ratio,
            date_of_birth=date_of_birth,
            weight=weight,
            color=color,
            markings=markings,
            parent_male_id=parent_male_id,
            parent_female_id=parent_female_id,
            generation=generation,
            ancestry=list(ancestry or []),
            pedigree_level=pedigree_level,
            health=health,
            fertility=fertility,
            growth_rate=growth_rate,
            litter_size=litter_size,
            offspring_count=0,
            status=status,
            notes=notes,
            tags=list(tags or []),
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def ancestry_token(self) -> str:
        """Token other animals record in their ancestry to point at this one."""
        return f"{self.animal_code}-{self.id}"

    @property
    def parent_ids(self) -> tuple[int, ...]:
        return tuple(pid for pid in (self.parent_male_id, self.parent_female_id) if pid is not None)

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)


def inherited_ancestry(male: Animal, female: Animal, extra: list[str] | None = None) -> list[str]:
    """Union of both parents' ancestry plus their own tokens, order preserved."""
    tokens = [
        *male.ancestry,
        *female.ancestry,
        *(extra or []),
        male.ancestry_token,
        female.ancestry_token,
    ]
    return list(dict.fromkeys(tokens))
