import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    A single knot of a tabulated function.

    Attributes:
        x (float): Abscissa of the knot.
        y (float): Ordinate of the knot.
    """
    x: float
    y: float

    def __post_init__(self):
        """Coerce coordinates to float and reject non-finite values."""
        try:
            x, y = float(self.x), float(self.y)
        except (TypeError, ValueError):
            raise TypeError(f"Point coordinates must be numeric, got ({self.x!r}, {self.y!r})")
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Point coordinates must be finite, got ({x}, {y})")
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    def __iter__(self):
        yield self.x
        yield self.y
