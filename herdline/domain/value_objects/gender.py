from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"

    def opposite(self) -> Gender:
        return Gender.FEMALE if self is Gender.MALE else Gender.MALE
