from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RelationshipClass(str, Enum):
    PARENT_CHILD = "parent-child"
    SIBLINGS = "siblings"
    HALF_SIBLINGS = "half-siblings"
    GRANDPARENT = "grandparent"
    GREAT_GRANDPARENT = "great-grandparent"
    COUSINS = "cousins"
    SHARED_ANCESTRY = "shared-ancestry"
    UNRELATED = "unrelated"
    NOT_FOUND = "not-found"


@dataclass(frozen=True, slots=True)
class Relationship:
    kind: RelationshipClass
    # Informational only: 1 = parent/sibling, 2 = grandparent/cousin, 3 = great-grandparent
    degree: int | None = None
    shared_ancestors: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RiskVerdict:
    is_risky: bool
    reason: str
