from __future__ import annotations

from herdline.domain.value_objects.relationship import (
    Relationship,
    RelationshipClass,
    RiskVerdict,
)

_REASONS: dict[RelationshipClass, str] = {
    RelationshipClass.PARENT_CHILD: (
        "Parent-child breeding is not allowed due to high inbreeding risk"
    ),
    RelationshipClass.SIBLINGS: "Siblings breeding is not allowed due to high inbreeding risk",
    RelationshipClass.HALF_SIBLINGS: (
        "Half-siblings breeding is not allowed due to moderate inbreeding risk"
    ),
    RelationshipClass.GRANDPARENT: "Grandparent-grandchild breeding increases inbreeding risk",
    RelationshipClass.GREAT_GRANDPARENT: (
        "Great-grandparent breeding increases inbreeding risk"
    ),
    RelationshipClass.COUSINS: "Cousins share grandparents, which increases inbreeding risk",
    RelationshipClass.SHARED_ANCESTRY: "Shared ancestry detected. This increases inbreeding risk.",
    RelationshipClass.UNRELATED: "No known relationship",
    RelationshipClass.NOT_FOUND: "Animal record not found; treated as unrelated",
}

_SAFE = frozenset({RelationshipClass.UNRELATED, RelationshipClass.NOT_FOUND})


def evaluate(relationship: Relationship | RelationshipClass) -> RiskVerdict:
    """Map a relationship to a breed/don't-breed verdict.

    Every matched relationship is risky regardless of its degree.
    """
    if isinstance(relationship, Relationship):
        kind = relationship.kind
        shared = relationship.shared_ancestors
    else:
        kind = relationship
        shared = ()
    if kind in _SAFE:
        return RiskVerdict(is_risky=False, reason=_REASONS[kind])
    if kind is RelationshipClass.SHARED_ANCESTRY and shared:
        return RiskVerdict(
            is_risky=True,
            reason=(
                f"Shared ancestry detected: {', '.join(shared)}. "
                "This increases inbreeding risk."
            ),
        )
    return RiskVerdict(is_risky=True, reason=_REASONS[kind])
