from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from calc_core.dimensions import CalculationResult, compute_all
from calc_core.report import (
    REPORT_FILENAME,
    REPORT_MIME,
    REPORT_SEPARATOR,
    REPORT_TITLE,
    format_cm,
    format_report,
    report_bytes,
)
from calc_core.window_inputs import WindowInput


def _two_unit_results() -> tuple[CalculationResult, ...]:
    return compute_all(
        [
            WindowInput(unit_number=1, length=100.0, width=60.0),
            WindowInput(unit_number=2, length=80.0, width=50.0),
        ]
    )


def test_two_unit_report_layout() -> None:
    text = format_report(_two_unit_results())
    lines = text.split("\n")
    assert len(lines) == 3 + 6 * 2
    assert lines[0] == REPORT_TITLE
    assert lines[1] == REPORT_SEPARATOR == "=" * 40
    assert lines[2] == ""
    assert lines[3] == "النافذة رقم: 1"
    assert lines[4] == "طول الإطار: 100.00 سم"
    assert lines[5] == "عرض الإطار: 57.40 سم"
    assert lines[6] == "طول الضلفة: 94.00 سم"
    assert lines[7] == "عرض الضلفة: 28.70 سم"
    assert lines[8] == ""
    assert lines[9] == "النافذة رقم: 2"
    assert lines[10] == "طول الإطار: 80.00 سم"
    assert lines[11] == "عرض الإطار: 47.40 سم"
    assert lines[12] == "طول الضلفة: 74.00 سم"
    assert lines[13] == "عرض الضلفة: 23.70 سم"
    assert lines[14] == ""


def test_empty_report_has_header_only() -> None:
    assert format_report([]) == "\n".join([REPORT_TITLE, REPORT_SEPARATOR, ""])


def test_negative_values_are_formatted() -> None:
    (result,) = compute_all([WindowInput(unit_number=1, length=0.0, width=2.0)])
    text = format_report([result])
    assert "عرض الإطار: -0.60 سم" in text
    assert "عرض الضلفة: -0.30 سم" in text
    assert "طول الضلفة: -6.00 سم" in text


def test_format_cm_two_decimals() -> None:
    assert format_cm(28.700000000000003) == "28.70"
    assert format_cm(1) == "1.00"
    assert format_cm(-0.6000000000000001) == "-0.60"


def test_report_artifact_metadata() -> None:
    assert REPORT_FILENAME == "windows-calculation.txt"
    assert REPORT_MIME == "text/plain"
    text = format_report(_two_unit_results())
    assert report_bytes(text).decode("utf-8") == text
