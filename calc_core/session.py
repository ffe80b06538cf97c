from __future__ import annotations

"""
Calculator session: current window inputs plus the last computed results.

States:
- DIRTY: inputs changed (or nothing computed yet); no results are exposed.
- COMPUTED: results match the current inputs and can be exported.

The session is an immutable value. Every operation returns a new session;
the caller (the Streamlit app) owns where it is stored.
"""

import logging
from dataclasses import dataclass, field

from .dimensions import CalculationResult, compute_all
from .report import format_report
from .window_inputs import MIN_COUNT, WindowInputSet

logger = logging.getLogger(__name__)

STATUS_DIRTY = "DIRTY"
STATUS_COMPUTED = "COMPUTED"


@dataclass(frozen=True)
class CalculatorSession:
    inputs: WindowInputSet = field(default_factory=WindowInputSet)
    computed: tuple[CalculationResult, ...] | None = None

    @property
    def status(self) -> str:
        return STATUS_COMPUTED if self.computed is not None else STATUS_DIRTY

    @property
    def can_export(self) -> bool:
        return self.computed is not None

    @property
    def results(self) -> tuple[CalculationResult, ...]:
        return self.computed if self.computed is not None else ()

    def set_count(self, n: int) -> CalculatorSession:
        if n < MIN_COUNT:
            return self
        return CalculatorSession(inputs=self.inputs.set_count(n), computed=None)

    def set_dimension(self, unit_number: int, field: str, value: object) -> CalculatorSession:
        return CalculatorSession(
            inputs=self.inputs.set_dimension(unit_number, field, value),
            computed=None,
        )

    def recompute(self) -> CalculatorSession:
        results = compute_all(self.inputs)
        logger.debug("Recomputed %d window unit(s)", len(results))
        return CalculatorSession(inputs=self.inputs, computed=results)

    def export(self) -> str | None:
        if self.computed is None:
            return None
        logger.debug("Exporting report for %d window unit(s)", len(self.computed))
        return format_report(self.computed)
