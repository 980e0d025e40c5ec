"""Data classes for boolean-mode search conditions."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Operator(str, enum.Enum):
    """MySQL boolean-mode term operators.

    - ``CAN_INCLUDE``: optional term, rows containing it rank higher
    - ``MUST_INCLUDE``: term must be present in every returned row
    - ``EXCLUDE``: term must not be present in any returned row
    - ``PREFER_WITHOUT``: rows containing the term rank lower but are kept
    """

    CAN_INCLUDE = ""
    MUST_INCLUDE = "+"
    EXCLUDE = "-"
    PREFER_WITHOUT = "~"


@dataclass(frozen=True)
class Condition:
    """A single term with its boolean-mode operator."""

    operator: Operator
    term: str

    def __str__(self) -> str:
        return f"{self.operator.value}{self.term}"
