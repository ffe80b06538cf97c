"""
calc_core — calculation core of the aluminium window calculator.

- window unit inputs with count resizing and value coercion
- frame/sash cut sizes from fixed manufacturing offsets
- plain-text export report
- calculator session (DIRTY/COMPUTED) tying the three together

UI is intentionally absent here: app/ is only a renderer over this package.
"""

from .dimensions import CalculationResult, compute, compute_all
from .report import REPORT_FILENAME, REPORT_MIME, format_report
from .session import CalculatorSession
from .window_inputs import WindowInput, WindowInputSet

__all__ = [
    "CalculationResult",
    "CalculatorSession",
    "REPORT_FILENAME",
    "REPORT_MIME",
    "WindowInput",
    "WindowInputSet",
    "compute",
    "compute_all",
    "format_report",
]
