from __future__ import annotations

"""
Window unit inputs.

- Unit numbers are always 1..count with no gaps; count is kept in [1..50].
- Resizing rebuilds the tuple by index: units that still fit keep their
  values, new units start at 0 x 0.
- Raw values coming from the UI are coerced, never rejected: bad dimension
  text becomes 0, bad count text becomes 1.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterator

logger = logging.getLogger(__name__)

MIN_COUNT = 1
MAX_COUNT = 50

FIELDS = ("length", "width")


@dataclass(frozen=True)
class WindowInput:
    unit_number: int
    length: float = 0.0
    width: float = 0.0


def coerce_dimension(raw: object) -> float:
    """Parse a raw length/width value; anything unusable becomes 0."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Dimension value %r is not a number, using 0", raw)
        return 0.0
    if not math.isfinite(value) or value < 0.0:
        logger.warning("Dimension value %r is out of range, using 0", raw)
        return 0.0
    return value


def coerce_count(raw: object) -> int:
    """
    Parse a raw unit count.

    Unparsable or zero -> 1. Negative values pass through so that
    WindowInputSet.set_count treats them as a no-op. Above MAX_COUNT -> MAX_COUNT.
    """
    if raw is None or isinstance(raw, bool):
        return MIN_COUNT
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return MIN_COUNT
    if not math.isfinite(value):
        return MIN_COUNT
    count = int(value)
    if count == 0:
        return MIN_COUNT
    return min(count, MAX_COUNT)


@dataclass(frozen=True)
class WindowInputSet:
    units: tuple[WindowInput, ...] = (WindowInput(unit_number=1),)

    @property
    def count(self) -> int:
        return len(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[WindowInput]:
        return iter(self.units)

    def get(self, unit_number: int) -> WindowInput | None:
        if 1 <= unit_number <= len(self.units):
            return self.units[unit_number - 1]
        return None

    def set_count(self, n: int) -> WindowInputSet:
        if n < MIN_COUNT:
            return self
        n = min(int(n), MAX_COUNT)
        if n == len(self.units):
            return self

        units: list[WindowInput] = []
        for idx in range(n):
            if idx < len(self.units):
                units.append(self.units[idx])
            else:
                units.append(WindowInput(unit_number=idx + 1))
        logger.debug("Resized window set %d -> %d", len(self.units), n)
        return WindowInputSet(units=tuple(units))

    def set_dimension(self, unit_number: int, field: str, value: object) -> WindowInputSet:
        if field not in FIELDS:
            raise ValueError(f"field must be one of {', '.join(FIELDS)}")
        current = self.get(unit_number)
        if current is None:
            return self

        updated = replace(current, **{field: coerce_dimension(value)})
        units = list(self.units)
        units[unit_number - 1] = updated
        return WindowInputSet(units=tuple(units))
