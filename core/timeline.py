"""Chronological employment timeline with gaps placed inline."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Literal

from models.employment import EmploymentInterval, Gap

TimelineKind = Literal["employment", "gap"]


@dataclass(frozen=True, slots=True)
class TimelineItem:
    """One row of the timeline: either an employment entry or a gap."""

    kind: TimelineKind
    interval: EmploymentInterval | None = None
    gap: Gap | None = None
    index: int | None = None


def _sort_key(item: tuple[int, EmploymentInterval]) -> date:
    start = item[1].start_date
    assert start is not None
    return start


def build_timeline(
    intervals: Sequence[EmploymentInterval], gaps: Sequence[Gap]
) -> list[TimelineItem]:
    """Return ``intervals`` oldest first with each gap just before the entry ending it.

    Usually that is directly after the interval the gap follows; when a
    short entry sits inside a longer one the gap still lands in date order.

    Entries that are too incomplete for gap analysis are listed last, in the
    order the applicant entered them.
    """

    gaps_by_following: dict[int, list[Gap]] = {}
    for gap in gaps:
        gaps_by_following.setdefault(gap.following_index, []).append(gap)

    valid = [(index, item) for index, item in enumerate(intervals) if item.is_valid_for_analysis]
    incomplete = [
        (index, item) for index, item in enumerate(intervals) if not item.is_valid_for_analysis
    ]

    timeline: list[TimelineItem] = []
    for index, interval in sorted(valid, key=_sort_key):
        for gap in gaps_by_following.get(index, []):
            timeline.append(TimelineItem(kind="gap", gap=gap, index=gap.preceding_index))
        timeline.append(TimelineItem(kind="employment", interval=interval, index=index))
    for index, interval in incomplete:
        timeline.append(TimelineItem(kind="employment", interval=interval, index=index))
    return timeline


__all__ = ["TimelineItem", "TimelineKind", "build_timeline"]
