"""Genealogy relationship analysis.

Animals are looked up in an id-indexed arena (``lineage``) loaded ahead of
time, so classification itself never touches storage. Ancestor walks are
bounded by depth and guarded with a visited set, which keeps them finite even
when bad data introduces a parent cycle.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from herdline.domain.models.animal import Animal
from herdline.domain.value_objects.relationship import Relationship, RelationshipClass

Lineage = Mapping[int, Animal]

MAX_ANCESTOR_DEPTH = 3


def ancestors_at(animal: Animal, lineage: Lineage, depth: int) -> set[int]:
    """Ids of the ancestors exactly ``depth`` generations above ``animal``."""
    if depth < 1:
        return set()
    seen: set[int] = {animal.id} if animal.id is not None else set()
    frontier = set(animal.parent_ids) - seen
    for _ in range(depth - 1):
        seen |= frontier
        next_frontier: set[int] = set()
        for ancestor_id in frontier:
            ancestor = lineage.get(ancestor_id)
            if ancestor is None:
                continue
            next_frontier.update(pid for pid in ancestor.parent_ids if pid not in seen)
        frontier = next_frontier
        if not frontier:
            break
    return frontier


def _share_parent(first: Animal | None, second: Animal | None) -> bool:
    if first is None or second is None:
        return False
    return bool(set(first.parent_ids) & set(second.parent_ids))


def _shared_tokens(first: Iterable[str], second: Iterable[str]) -> tuple[str, ...]:
    other = set(second)
    return tuple(dict.fromkeys(token for token in first if token in other))


def classify(a: Animal | None, b: Animal | None, lineage: Lineage) -> Relationship:
    """Classify how two animals are related.

    Checks run in a fixed precedence and the first match wins: parent-child,
    siblings / half-siblings, grandparent, great-grandparent, cousins, shared
    ancestry tokens. A missing animal yields ``NOT_FOUND``.

    Cousins are matched across every pairing of the two animals' parents, not
    only same-side parents, so a sire/dam cousin link is caught as well.
    """
    if a is None or b is None:
        return Relationship(RelationshipClass.NOT_FOUND)

    if a.id in b.parent_ids or b.id in a.parent_ids:
        return Relationship(RelationshipClass.PARENT_CHILD, degree=1)

    same_sire = a.parent_male_id is not None and a.parent_male_id == b.parent_male_id
    same_dam = a.parent_female_id is not None and a.parent_female_id == b.parent_female_id
    if same_sire and same_dam:
        return Relationship(RelationshipClass.SIBLINGS, degree=1)
    if same_sire or same_dam:
        return Relationship(RelationshipClass.HALF_SIBLINGS, degree=1)

    for depth, kind in (
        (2, RelationshipClass.GRANDPARENT),
        (MAX_ANCESTOR_DEPTH, RelationshipClass.GREAT_GRANDPARENT),
    ):
        if b.id in ancestors_at(a, lineage, depth) or a.id in ancestors_at(b, lineage, depth):
            return Relationship(kind, degree=depth)

    for parent_a in a.parent_ids:
        for parent_b in b.parent_ids:
            if parent_a != parent_b and _share_parent(
                lineage.get(parent_a), lineage.get(parent_b)
            ):
                return Relationship(RelationshipClass.COUSINS, degree=2)

    shared = _shared_tokens(a.ancestry, b.ancestry)
    if shared:
        return Relationship(RelationshipClass.SHARED_ANCESTRY, shared_ancestors=shared)

    return Relationship(RelationshipClass.UNRELATED)
