from __future__ import annotations

from typing import Iterable

from .dimensions import CalculationResult

REPORT_FILENAME = "windows-calculation.txt"
REPORT_MIME = "text/plain"
REPORT_ENCODING = "utf-8"

REPORT_TITLE = "تقرير حساب النوافذ الألومنيوم"
REPORT_SEPARATOR = "=" * 40
UNIT_SUFFIX = "سم"

LABEL_UNIT = "النافذة رقم"
LABEL_FRAME_LENGTH = "طول الإطار"
LABEL_FRAME_WIDTH = "عرض الإطار"
LABEL_SASH_LENGTH = "طول الضلفة"
LABEL_SASH_WIDTH = "عرض الضلفة"


def format_cm(value: float) -> str:
    """Two decimals, the only rounding applied anywhere."""
    return f"{float(value):.2f}"


def _result_lines(result: CalculationResult) -> list[str]:
    return [
        f"{LABEL_UNIT}: {result.unit_number}",
        f"{LABEL_FRAME_LENGTH}: {format_cm(result.frame_length)} {UNIT_SUFFIX}",
        f"{LABEL_FRAME_WIDTH}: {format_cm(result.frame_width)} {UNIT_SUFFIX}",
        f"{LABEL_SASH_LENGTH}: {format_cm(result.sash_length)} {UNIT_SUFFIX}",
        f"{LABEL_SASH_WIDTH}: {format_cm(result.sash_width)} {UNIT_SUFFIX}",
        "",
    ]


def format_report(results: Iterable[CalculationResult]) -> str:
    lines = [REPORT_TITLE, REPORT_SEPARATOR, ""]
    for result in results:
        lines.extend(_result_lines(result))
    return "\n".join(lines)


def report_bytes(text: str) -> bytes:
    return text.encode(REPORT_ENCODING)
