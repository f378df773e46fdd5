from __future__ import annotations

from enum import Enum


class OffspringSex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NEUTERED = "neutered"
