from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date

import streamlit as st

from constants.keys import UIKeys
from core.explanations import reconcile_explanations, unexplained_gaps, upsert_explanation
from core.gaps import detect_live_gaps
from models.employment import EmploymentInterval, ExplainedGap, Gap, GapExplanation
from state.ensure_state import (
    get_explanations,
    get_intervals,
    session_today,
    set_explanations,
    set_intervals,
)
from utils.i18n import (
    EMPLOYMENT_STEP_INTRO,
    EMPLOYMENT_STEP_TITLE,
    GAP_DETECTED_LABEL,
    GAP_EXPLANATION_LABEL,
    GAP_REVIEW_HINT,
    GAPS_UNEXPLAINED_WARNING,
    tr,
    tr_pair,
)
from wizard.date_utils import format_date

__all__ = [
    "apply_explanation_inputs",
    "gaps_by_preceding_index",
    "step_employment",
    "sync_interval_from_widgets",
]

logger = logging.getLogger(__name__)

EARLIEST_START = date(1950, 1, 1)
_WIDGET_FIELDS = (
    "employer",
    "position",
    "start_date",
    "end_date",
    "is_current",
    "worked_with_vulnerable",
)


def gaps_by_preceding_index(gaps: Sequence[Gap]) -> dict[int, list[Gap]]:
    """Group ``gaps`` by the position of the entry they follow."""

    grouped: dict[int, list[Gap]] = {}
    for gap in gaps:
        grouped.setdefault(gap.preceding_index, []).append(gap)
    return grouped


def apply_explanation_inputs(
    gaps: Sequence[Gap],
    explanations: Sequence[GapExplanation],
    inputs: Mapping[str, str],
) -> list[GapExplanation]:
    """Merge text-area values keyed by preceding interval id into ``explanations``.

    Gaps without an entry in ``inputs`` keep their stored explanation.
    """

    updated = reconcile_explanations(gaps, explanations)
    for gap in gaps:
        raw = inputs.get(gap.preceding_interval_id)
        if raw is None:
            continue
        updated = upsert_explanation(updated, gap, raw)
    return updated


def sync_interval_from_widgets(
    interval: EmploymentInterval, widget_state: Mapping[str, object]
) -> EmploymentInterval:
    """Return ``interval`` updated with any widget values already in ``widget_state``.

    Streamlit stores keyed widget values before the script reruns, so gaps
    can be detected before the entries are drawn and shown inline.
    """

    update: dict[str, object] = {}
    for field in _WIDGET_FIELDS:
        key = UIKeys.employment_field(interval.id, field)
        if key in widget_state:
            update[field] = widget_state[key]
    if not update:
        return interval
    synced = EmploymentInterval.model_validate({**interval.model_dump(), **update})
    if synced.is_current:
        synced = synced.model_copy(update={"end_date": None})
    return synced


def _render_interval_inputs(interval: EmploymentInterval, today: date) -> None:
    key = UIKeys.employment_field
    cols = st.columns(2)
    cols[0].text_input(
        tr("Arbeitgeber", "Employer"),
        value=interval.employer,
        key=key(interval.id, "employer"),
    )
    cols[1].text_input(
        tr("Position", "Position"),
        value=interval.position or "",
        key=key(interval.id, "position"),
    )
    is_current = st.checkbox(
        tr("Aktuelle Stelle", "Current position"),
        value=interval.is_current,
        key=key(interval.id, "is_current"),
    )
    date_cols = st.columns(2)
    date_cols[0].date_input(
        tr("Beginn", "Start date"),
        value=interval.start_date,
        min_value=EARLIEST_START,
        max_value=today,
        format="DD/MM/YYYY",
        key=key(interval.id, "start_date"),
    )
    date_cols[1].date_input(
        tr("Ende", "End date"),
        value=interval.end_date,
        min_value=EARLIEST_START,
        max_value=today,
        format="DD/MM/YYYY",
        disabled=is_current,
        key=key(interval.id, "end_date"),
    )
    st.checkbox(
        tr(
            "Tätigkeit mit Kindern oder schutzbedürftigen Erwachsenen",
            "Worked with children or vulnerable adults",
        ),
        value=interval.worked_with_vulnerable,
        key=key(interval.id, "worked_with_vulnerable"),
    )


def _render_gap_input(gap: Gap, stored: GapExplanation | None) -> str:
    st.warning(
        tr_pair(GAP_DETECTED_LABEL).format(
            days=gap.days,
            start=format_date(gap.start_date),
            end=format_date(gap.end_date),
        ),
        icon="⏳",
    )
    if ExplainedGap(gap=gap, explanation=stored).needs_review:
        st.info(tr_pair(GAP_REVIEW_HINT))
    return st.text_area(
        tr_pair(GAP_EXPLANATION_LABEL),
        value=stored.reason if stored else "",
        key=UIKeys.gap_explanation(gap.preceding_interval_id),
    )


def step_employment() -> None:
    """Render the employment history step with inline gap explanations."""

    today = session_today()
    st.header(tr_pair(EMPLOYMENT_STEP_TITLE))
    st.caption(tr_pair(EMPLOYMENT_STEP_INTRO))

    intervals = [sync_interval_from_widgets(item, st.session_state) for item in get_intervals()]
    set_intervals(intervals)
    gaps = detect_live_gaps(intervals, today=today)
    stored = reconcile_explanations(gaps, get_explanations())
    stored_by_anchor = {item.preceding_interval_id: item for item in stored}
    grouped = gaps_by_preceding_index(gaps)

    inputs: dict[str, str] = {}
    removed: set[str] = set()
    for index, interval in enumerate(intervals):
        with st.container(border=True):
            st.subheader(f"{index + 1}. {interval.employer or tr('Neue Stelle', 'New position')}")
            _render_interval_inputs(interval, today)
            if st.button(tr("Entfernen", "Remove"), key=UIKeys.employment_field(interval.id, "remove")):
                removed.add(interval.id)
        for gap in grouped.get(index, []):
            inputs[gap.preceding_interval_id] = _render_gap_input(
                gap, stored_by_anchor.get(gap.preceding_interval_id)
            )

    explanations = apply_explanation_inputs(gaps, stored, inputs)
    set_explanations(explanations)

    if removed:
        set_intervals([item for item in intervals if item.id not in removed])
        logger.info("Removed %d employment entr(y/ies)", len(removed))
        st.rerun()
    if st.button(tr("Stelle hinzufügen", "Add position"), key=UIKeys.ADD_EMPLOYMENT):
        set_intervals([*intervals, EmploymentInterval()])
        st.rerun()

    missing = unexplained_gaps(gaps, explanations)
    if missing:
        st.warning(tr_pair(GAPS_UNEXPLAINED_WARNING).format(count=len(missing)))
    elif intervals:
        st.success(tr("Werdegang vollständig.", "Employment history complete."))
