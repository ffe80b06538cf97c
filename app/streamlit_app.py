from __future__ import annotations

import logging
import sys
from pathlib import Path
import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.i18n import t  # noqa: E402
from app.ui_components import results_frame, status_chip  # noqa: E402
from calc_core import REPORT_FILENAME, REPORT_MIME, CalculatorSession  # noqa: E402
from calc_core.report import report_bytes  # noqa: E402
from calc_core.window_inputs import MAX_COUNT, MIN_COUNT, coerce_count  # noqa: E402

logger = logging.getLogger(__name__)

SESSION_KEY = "calculator"
GRID_COLUMNS = 3


def _init_state() -> None:
    state = st.session_state
    state.setdefault(SESSION_KEY, CalculatorSession())


def _session() -> CalculatorSession:
    return st.session_state[SESSION_KEY]


def _store(session: CalculatorSession) -> None:
    st.session_state[SESSION_KEY] = session


def _on_count_change() -> None:
    count = coerce_count(st.session_state.get("unit_count"))
    _store(_session().set_count(count))


def _on_dimension_change(unit_number: int, field: str) -> None:
    raw = st.session_state.get(f"{field}-{unit_number}")
    _store(_session().set_dimension(unit_number, field, raw))


def _render_count(session: CalculatorSession) -> None:
    st.subheader(t("count.header"))
    st.caption(t("count.description"))
    cols = st.columns([1, 3], vertical_alignment="bottom")
    with cols[0]:
        st.number_input(
            t("count.label"),
            min_value=MIN_COUNT,
            max_value=MAX_COUNT,
            step=1,
            value=session.inputs.count,
            key="unit_count",
            on_change=_on_count_change,
        )
    with cols[1]:
        count = session.inputs.count
        badge = t("count.badge_one") if count == 1 else t("count.badge_many", count=count)
        st.markdown(f"**{badge}**")


def _render_inputs(session: CalculatorSession) -> None:
    st.subheader(t("inputs.header"))
    st.caption(t("inputs.description"))
    units = list(session.inputs)
    for start in range(0, len(units), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, unit in zip(cols, units[start : start + GRID_COLUMNS]):
            with col, st.container(border=True):
                st.markdown(f"**{t('inputs.unit_title', unit=unit.unit_number)}**")
                for field, label_key in (("length", "inputs.length"), ("width", "inputs.width")):
                    value = getattr(unit, field)
                    st.number_input(
                        t(label_key),
                        min_value=0.0,
                        step=0.1,
                        value=value if value else None,
                        placeholder="0",
                        key=f"{field}-{unit.unit_number}",
                        on_change=_on_dimension_change,
                        args=(unit.unit_number, field),
                    )


def _render_results(session: CalculatorSession) -> None:
    if not session.can_export or not session.results:
        return

    st.subheader(t("results.header"))
    st.caption(t("results.description"))

    try:
        report = session.export()
    except Exception as exc:  # pragma: no cover - UI error path
        st.error(t("errors.export_failed", exc=exc))
        report = None
    if report is not None:
        st.download_button(
            t("results.download"),
            data=report_bytes(report),
            file_name=REPORT_FILENAME,
            mime=REPORT_MIME,
        )

    st.dataframe(results_frame(session.results, t=t), hide_index=True)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(page_title=t("app.title"), layout="wide")
    _init_state()

    st.title(t("app.title"))
    st.write(t("app.subtitle"))

    _render_count(_session())
    _render_inputs(_session())

    if st.button(t("calculate.btn"), type="primary"):
        try:
            _store(_session().recompute())
            logger.info("Calculated %d window unit(s)", _session().inputs.count)
        except Exception as exc:  # pragma: no cover - UI error path
            st.error(t("errors.calc_failed", exc=exc))

    status_chip(t("chips.results"), _session().status, t=t)
    _render_results(_session())


if __name__ == "__main__":
    main()
