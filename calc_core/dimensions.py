from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .window_inputs import WindowInput

# Manufacturing offsets, cm.
FRAME_WIDTH_OFFSET_CM = 2.6
SASH_LENGTH_OFFSET_CM = 6.0
SASH_WIDTH_DIVISOR = 2.0


@dataclass(frozen=True)
class CalculationResult:
    unit_number: int
    frame_length: float
    frame_width: float
    sash_length: float
    sash_width: float


def frame_width(width: float) -> float:
    return width - FRAME_WIDTH_OFFSET_CM


def sash_length(length: float) -> float:
    return length - SASH_LENGTH_OFFSET_CM


def sash_width(width: float) -> float:
    return frame_width(width) / SASH_WIDTH_DIVISOR


def compute(window: WindowInput) -> CalculationResult:
    """
    Frame and sash cut sizes for one unit.

    No rounding and no clamping: a width below the frame offset gives
    negative frame/sash widths.
    """
    return CalculationResult(
        unit_number=window.unit_number,
        frame_length=window.length,
        frame_width=frame_width(window.width),
        sash_length=sash_length(window.length),
        sash_width=sash_width(window.width),
    )


def compute_all(windows: Iterable[WindowInput]) -> tuple[CalculationResult, ...]:
    return tuple(compute(w) for w in windows)
