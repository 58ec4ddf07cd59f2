"""Work out which employers must be asked for a reference."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

import config
from core.gaps import detect_employment_gaps
from models.employment import EmploymentInterval


class ReferenceReason(StrEnum):
    """Why an employer appears on the reference list."""

    CURRENT_EMPLOYER = "current_employer"
    PREVIOUS_EMPLOYER = "previous_employer"
    VULNERABLE_WORK = "vulnerable_work"
    GAP_NEIGHBOUR = "gap_neighbour"


@dataclass(frozen=True, slots=True)
class ReferencePolicy:
    """Toggles for the reference categories requested from applicants."""

    current_employer: bool = True
    previous_employer: bool = True
    vulnerable_work: bool = True
    gap_neighbours: bool = True


@dataclass(slots=True)
class ReferenceRequirement:
    """An employer that must provide a reference, with every applicable reason."""

    interval: EmploymentInterval
    reasons: list[ReferenceReason] = field(default_factory=list)


def current_employer(intervals: Sequence[EmploymentInterval]) -> EmploymentInterval | None:
    return next((item for item in intervals if item.is_current), None)


def previous_employers(intervals: Sequence[EmploymentInterval]) -> list[EmploymentInterval]:
    """Return finished positions, most recently ended first."""

    finished = [item for item in intervals if not item.is_current]
    return sorted(finished, key=lambda item: item.end_date or date.min, reverse=True)


def required_references(
    intervals: Sequence[EmploymentInterval],
    policy: ReferencePolicy | None = None,
    *,
    today: date | None = None,
    min_gap_days: int | None = None,
) -> list[ReferenceRequirement]:
    """Return the employers to contact, in the order they were first required.

    Covers the current employer, the most recent previous employer (two
    when there is no current one), every role involving children or
    vulnerable adults, and the employers on either side of a gap of at
    least ``min_gap_days`` days.
    """

    active_policy = policy or ReferencePolicy()
    threshold = config.REFERENCE_GAP_THRESHOLD_DAYS if min_gap_days is None else min_gap_days
    requirements: dict[str, ReferenceRequirement] = {}

    def _require(interval: EmploymentInterval, reason: ReferenceReason) -> None:
        entry = requirements.setdefault(interval.id, ReferenceRequirement(interval=interval))
        if reason not in entry.reasons:
            entry.reasons.append(reason)

    current = current_employer(intervals)
    if active_policy.current_employer and current is not None:
        _require(current, ReferenceReason.CURRENT_EMPLOYER)

    if active_policy.previous_employer:
        limit = 1 if current is not None else 2
        for interval in previous_employers(intervals)[:limit]:
            _require(interval, ReferenceReason.PREVIOUS_EMPLOYER)

    if active_policy.vulnerable_work:
        for interval in intervals:
            if interval.worked_with_vulnerable:
                _require(interval, ReferenceReason.VULNERABLE_WORK)

    if active_policy.gap_neighbours:
        for gap in detect_employment_gaps(intervals, min_days=threshold, today=today):
            _require(intervals[gap.preceding_index], ReferenceReason.GAP_NEIGHBOUR)
            _require(intervals[gap.following_index], ReferenceReason.GAP_NEIGHBOUR)

    return list(requirements.values())


__all__ = [
    "ReferencePolicy",
    "ReferenceReason",
    "ReferenceRequirement",
    "current_employer",
    "previous_employers",
    "required_references",
]
