from __future__ import annotations

from enum import Enum


class BreedingEventStatus(str, Enum):
    PENDING = "pending"
    SUCCESSFUL = "successful"
    UNSUCCESSFUL = "unsuccessful"
    BIRTHED = "birthed"

    @property
    def is_terminal(self) -> bool:
        return self is not BreedingEventStatus.PENDING

    def can_transition_to(self, target: BreedingEventStatus) -> bool:
        # Only pending events move; every other state is final
        return self is BreedingEventStatus.PENDING and target is not BreedingEventStatus.PENDING
