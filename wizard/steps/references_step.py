from __future__ import annotations

import streamlit as st

import config
from core.gaps import detect_reportable_gaps
from core.references import ReferenceReason, ReferenceRequirement, required_references
from core.timeline import build_timeline
from state.ensure_state import get_intervals, session_today
from utils.i18n import REFERENCES_EMPTY_WARNING, REFERENCES_STEP_TITLE, tr, tr_pair
from wizard.date_utils import format_date

__all__ = ["describe_reasons", "step_references"]


_REASON_LABELS: dict[ReferenceReason, tuple[str, str]] = {
    ReferenceReason.CURRENT_EMPLOYER: ("Aktueller Arbeitgeber", "Current employer"),
    ReferenceReason.PREVIOUS_EMPLOYER: ("Letzter Arbeitgeber", "Most recent previous employer"),
    ReferenceReason.VULNERABLE_WORK: (
        "Tätigkeit mit schutzbedürftigen Personen",
        "Worked with children or vulnerable adults",
    ),
    ReferenceReason.GAP_NEIGHBOUR: (
        "Angrenzend an eine Lücke von mindestens einem Monat",
        "Adjacent to a gap of one month or more",
    ),
}


def describe_reasons(requirement: ReferenceRequirement, lang: str | None = None) -> str:
    return ", ".join(tr_pair(_REASON_LABELS[reason], lang=lang) for reason in requirement.reasons)


def step_references() -> None:
    """Render the employment timeline and the references that will be requested."""

    today = session_today()
    intervals = get_intervals()
    st.header(tr_pair(REFERENCES_STEP_TITLE))
    if not intervals:
        st.warning(tr_pair(REFERENCES_EMPTY_WARNING))
        return

    st.subheader(tr("Zeitleiste", "Employment history timeline"))
    gaps = detect_reportable_gaps(intervals, today=today)
    for item in build_timeline(intervals, gaps):
        if item.kind == "gap" and item.gap is not None:
            st.warning(
                tr(
                    "Lücke: {start} – {end} ({days} Tage)",
                    "Gap: {start} – {end} ({days} days)",
                ).format(
                    start=format_date(item.gap.start_date),
                    end=format_date(item.gap.end_date),
                    days=item.gap.days,
                )
            )
        elif item.interval is not None:
            interval = item.interval
            end = tr("heute", "present") if interval.is_current else format_date(interval.end_date, placeholder="?")
            st.markdown(
                f"**{interval.employer or '-'}** · {format_date(interval.start_date, placeholder='?')} – {end}"
            )

    st.subheader(tr("Angefragte Referenzen", "References to be requested"))
    requirements = required_references(
        intervals, today=today, min_gap_days=config.REFERENCE_GAP_THRESHOLD_DAYS
    )
    for requirement in requirements:
        interval = requirement.interval
        with st.container(border=True):
            st.markdown(f"**{interval.employer or '-'}**")
            st.caption(describe_reasons(requirement))
            if interval.reference_name:
                st.write(interval.reference_name)
