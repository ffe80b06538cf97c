from __future__ import annotations

from typing import Callable, Iterable

import pandas as pd
import streamlit as st

from calc_core.dimensions import CalculationResult
from calc_core.report import format_cm
from calc_core.session import STATUS_COMPUTED, STATUS_DIRTY

_STATUS_KEYS = {STATUS_COMPUTED: "status.computed", STATUS_DIRTY: "status.dirty"}

RESULT_COLUMNS = (
    ("unit_number", "table.unit_number"),
    ("frame_length", "table.frame_length"),
    ("frame_width", "table.frame_width"),
    ("sash_length", "table.sash_length"),
    ("sash_width", "table.sash_width"),
)


def _status_style(status: str) -> tuple[str, str]:
    """
    Returns (bg_color, fg_color) for a status pill.
    Colors are chosen to be readable in both Streamlit light/dark themes.
    """
    s = (status or "").upper().strip()
    if s == STATUS_COMPUTED:
        return "#1f7a3a", "white"
    if s == STATUS_DIRTY:
        return "#b45309", "white"
    return "#374151", "white"


def results_frame(
    results: Iterable[CalculationResult],
    *,
    t: Callable[..., str] | None = None,
) -> pd.DataFrame:
    """
    Results table for display: one row per unit, every size as a 2-decimal string.
    Column headers are localized when t is provided.
    """
    rows: list[dict[str, str]] = []
    for result in results:
        row: dict[str, str] = {}
        for attr, key in RESULT_COLUMNS:
            value = getattr(result, attr)
            header = t(key) if t else attr
            row[header] = str(value) if attr == "unit_number" else format_cm(value)
        rows.append(row)
    columns = [t(key) if t else attr for attr, key in RESULT_COLUMNS]
    return pd.DataFrame(rows, columns=columns)


def status_chip(
    label: str,
    status: str,
    *,
    t: Callable[..., str] | None = None,
) -> None:
    """
    Compact status chip for the calculator session (COMPUTED/DIRTY).
    When t is provided, status is localized.
    """
    bg, fg = _status_style(status)
    status_label = t(_STATUS_KEYS.get(status, "status.dirty")) if t else status
    st.markdown(
        f"""
        <span style="
          display:inline-block;
          padding:0.15rem 0.55rem;
          border-radius:999px;
          background:{bg};
          color:{fg};
          font-weight:600;
          font-size:0.85rem;
          line-height:1.4;
          white-space:nowrap;
        ">{label}: {status_label}</span>
        """,
        unsafe_allow_html=True,
    )
