"""Detect uncovered periods between employment intervals."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

import config
from models.employment import EmploymentInterval, Gap, day_after, day_before

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _ResolvedInterval:
    index: int
    interval: EmploymentInterval
    start: date
    end: date


def _resolve_intervals(
    intervals: Sequence[EmploymentInterval], today: date
) -> list[_ResolvedInterval]:
    """Drop incomplete intervals and resolve effective end dates."""

    resolved: list[_ResolvedInterval] = []
    for index, interval in enumerate(intervals):
        if not interval.is_valid_for_analysis:
            continue
        end = interval.effective_end(today)
        assert interval.start_date is not None and end is not None
        resolved.append(_ResolvedInterval(index, interval, interval.start_date, end))
    # ``sorted`` is stable, so equal start dates keep the caller's order.
    return sorted(resolved, key=lambda item: item.start)


def _gap_between(earlier: _ResolvedInterval, later: _ResolvedInterval) -> Gap | None:
    gap_start = day_after(earlier.end)
    if later.start <= gap_start:
        return None
    return Gap(
        start_date=gap_start,
        end_date=day_before(later.start),
        days=(later.start - gap_start).days,
        preceding_index=earlier.index,
        preceding_interval_id=earlier.interval.id,
        following_index=later.index,
        following_interval_id=later.interval.id,
    )


def _extends_coverage(anchor: _ResolvedInterval, candidate: _ResolvedInterval) -> bool:
    if anchor.interval.is_current:
        return False
    return candidate.interval.is_current or candidate.end > anchor.end


def detect_employment_gaps(
    intervals: Sequence[EmploymentInterval],
    *,
    min_days: int,
    today: date | None = None,
) -> list[Gap]:
    """Return gaps of at least ``min_days`` uncovered days between ``intervals``.

    Intervals without a start date, or without both an end date and the
    ``is_current`` flag, are ignored. Current positions end on ``today``
    and never precede a gap. The input sequence is not modified and the
    result is ordered by gap start date.

    Args:
        intervals: Employment entries in any order.
        min_days: Smallest gap length, in days, that is reported.
        today: Reference date for current positions; defaults to
            ``date.today()``. Pass it explicitly to keep repeated calls
            within one editing session consistent.

    Raises:
        ValueError: If ``min_days`` is smaller than one.
    """

    if min_days < 1:
        raise ValueError(f"min_days must be at least 1, got {min_days}")
    reference_day = today or date.today()
    ordered = _resolve_intervals(intervals, reference_day)
    if len(ordered) < 2:
        return []

    gaps: list[Gap] = []
    # ``anchor`` is the interval reaching furthest so far; a short entry
    # nested inside a longer one must not open a gap after it.
    anchor = ordered[0]
    for following in ordered[1:]:
        gap = None if anchor.interval.is_current else _gap_between(anchor, following)
        if gap is not None and gap.days >= min_days:
            gaps.append(gap)
        if _extends_coverage(anchor, following):
            anchor = following

    logger.debug(
        "Detected %d gap(s) across %d valid interval(s) (min_days=%d)",
        len(gaps),
        len(ordered),
        min_days,
    )
    return gaps


def detect_live_gaps(
    intervals: Sequence[EmploymentInterval], *, today: date | None = None
) -> list[Gap]:
    """Detect every uncovered period while the applicant edits their history."""

    return detect_employment_gaps(
        intervals, min_days=config.LIVE_GAP_THRESHOLD_DAYS, today=today
    )


def detect_reportable_gaps(
    intervals: Sequence[EmploymentInterval], *, today: date | None = None
) -> list[Gap]:
    """Detect gaps long enough to matter for reference and compliance checks."""

    return detect_employment_gaps(
        intervals, min_days=config.REFERENCE_GAP_THRESHOLD_DAYS, today=today
    )


__all__ = ["detect_employment_gaps", "detect_live_gaps", "detect_reportable_gaps"]
