"""Value predicates used to qualify point queries."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Comparison(enum.Enum):
    """How a value is compared with a reference value."""

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    def admits(self, value: float, reference: float) -> bool:
        """Whether value passes this comparison against reference."""
        if self is Comparison.GT:
            return not value <= reference
        if self is Comparison.GTE:
            return not value < reference
        if self is Comparison.LT:
            return not value >= reference
        return not value > reference


@dataclass
class WhereClause:
    """A conjunction of comparisons against reference values."""

    clauses: dict[Comparison, float] = field(default_factory=dict)

    def filter(self, value: float) -> bool:
        """True when value satisfies every clause."""
        return all(
            comparison.admits(value, reference)
            for comparison, reference in self.clauses.items()
        )