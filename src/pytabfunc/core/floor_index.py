from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class FloorIndexKind(Enum):
    """Where a query x falls relative to the knots of a table."""
    BEFORE = auto()
    BETWEEN = auto()
    AT_OR_AFTER_END = auto()


@dataclass(frozen=True)
class FloorIndex:
    """
    Tagged result of a floor search.

    ``index`` is only meaningful for ``BETWEEN``; it is the knot i with
    ``x[i] <= x < x[i+1]``.
    """
    kind: FloorIndexKind
    index: Optional[int] = None

    @classmethod
    def before(cls) -> "FloorIndex":
        return cls(FloorIndexKind.BEFORE)

    @classmethod
    def between(cls, index: int) -> "FloorIndex":
        return cls(FloorIndexKind.BETWEEN, index)

    @classmethod
    def at_or_after_end(cls) -> "FloorIndex":
        return cls(FloorIndexKind.AT_OR_AFTER_END)

    @classmethod
    def from_raw(cls, raw: int, count: int, is_before: bool) -> "FloorIndex":
        """Build the tagged form from the integer sentinel convention (0 / i / count)."""
        if is_before:
            return cls.before()
        if raw >= count:
            return cls.at_or_after_end()
        return cls.between(raw)

    @property
    def is_between(self) -> bool:
        return self.kind is FloorIndexKind.BETWEEN
