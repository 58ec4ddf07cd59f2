"""Plain-text summary of the employment history for the final review page."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

import config
from core.explanations import match_explanations
from core.gaps import detect_employment_gaps
from core.timeline import build_timeline
from models.employment import EmploymentInterval, ExplainedGap, GapExplanation
from utils.i18n import (
    EMPLOYMENT_STEP_TITLE,
    PRESENT_LABEL,
    SUMMARY_REVIEW_MARKER,
    SUMMARY_UNEXPLAINED_MARKER,
    tr,
    tr_pair,
)
from wizard.date_utils import format_date


def _format_interval(interval: EmploymentInterval, lang: str) -> str:
    start = format_date(interval.start_date, placeholder="?")
    if interval.is_current:
        end = tr_pair(PRESENT_LABEL, lang=lang)
    else:
        end = format_date(interval.end_date, placeholder="?")
    employer = interval.employer.strip() or "-"
    line = f"- {start} - {end}: {employer}"
    if interval.position:
        line += f" ({interval.position.strip()})"
    return line


def _format_gap(item: ExplainedGap, lang: str) -> str:
    gap = item.gap
    header = tr(
        "  Lücke {start} - {end} ({days} Tage)",
        "  Gap {start} - {end} ({days} days)",
        lang=lang,
    ).format(start=format_date(gap.start_date), end=format_date(gap.end_date), days=gap.days)
    reason = item.reason or f"[{tr_pair(SUMMARY_UNEXPLAINED_MARKER, lang=lang)}]"
    if item.needs_review:
        reason += f" [{tr_pair(SUMMARY_REVIEW_MARKER, lang=lang)}]"
    return f"{header}: {reason}"


def render_employment_summary(
    intervals: Sequence[EmploymentInterval],
    explanations: Sequence[GapExplanation] = (),
    *,
    today: date | None = None,
    min_gap_days: int | None = None,
    lang: str | None = None,
) -> str:
    """Return the employment history with every gap and its explanation inline."""

    code = lang or config.DEFAULT_LANGUAGE
    threshold = config.LIVE_GAP_THRESHOLD_DAYS if min_gap_days is None else min_gap_days
    gaps = detect_employment_gaps(intervals, min_days=threshold, today=today)
    explained = {item.gap.range_key: item for item in match_explanations(gaps, explanations)}

    lines = [f"## {tr_pair(EMPLOYMENT_STEP_TITLE, lang=code)}", ""]
    if not intervals:
        lines.append(tr("Keine Angaben.", "No entries.", lang=code))
        return "\n".join(lines)
    for item in build_timeline(intervals, gaps):
        if item.kind == "gap" and item.gap is not None:
            lines.append(_format_gap(explained[item.gap.range_key], code))
        elif item.interval is not None:
            lines.append(_format_interval(item.interval, code))
    return "\n".join(lines)


__all__ = ["render_employment_summary"]
