"""Pair applicant gap explanations with freshly detected gaps.

Gaps are recomputed whenever the employment history changes, so
explanations cannot hold a reference to a gap object. Each explanation is
anchored to the interval the gap follows; an edit elsewhere in the history
leaves the anchor untouched and the explanation keeps matching. Records
without an anchor (for example imported from older snapshots) fall back to
an exact date-range comparison.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from core.errors import UnexplainedGapsError
from models.employment import ExplainedGap, Gap, GapExplanation

logger = logging.getLogger(__name__)


def _find_match(gap: Gap, candidates: list[GapExplanation]) -> GapExplanation | None:
    for explanation in candidates:
        if explanation.preceding_interval_id == gap.preceding_interval_id:
            return explanation
    for explanation in candidates:
        if explanation.preceding_interval_id is None and explanation.range_key == gap.range_key:
            return explanation
    return None


def match_explanations(
    gaps: Sequence[Gap], explanations: Sequence[GapExplanation]
) -> list[ExplainedGap]:
    """Return ``gaps`` paired with their explanation; each explanation is used once."""

    remaining = list(explanations)
    paired: list[ExplainedGap] = []
    for gap in gaps:
        match = _find_match(gap, remaining)
        if match is not None:
            remaining.remove(match)
        paired.append(ExplainedGap(gap=gap, explanation=match))
    return paired


def reconcile_explanations(
    gaps: Sequence[Gap], explanations: Sequence[GapExplanation]
) -> list[GapExplanation]:
    """Return explanations that still match a gap, refreshed to its current range."""

    reconciled: list[GapExplanation] = []
    for item in match_explanations(gaps, explanations):
        if item.explanation is None:
            continue
        reconciled.append(
            item.explanation.model_copy(
                update={
                    "start_date": item.gap.start_date,
                    "end_date": item.gap.end_date,
                    "preceding_interval_id": item.gap.preceding_interval_id,
                }
            )
        )
    dropped = len(explanations) - len(reconciled)
    if dropped:
        logger.debug("Dropped %d orphaned gap explanation(s)", dropped)
    return reconciled


def upsert_explanation(
    explanations: Sequence[GapExplanation], gap: Gap, reason: str
) -> list[GapExplanation]:
    """Return a copy of ``explanations`` with ``reason`` stored for ``gap``.

    A blank ``reason`` removes any stored explanation for the gap. An
    unchanged ``reason`` keeps the gap length it was originally written for.
    """

    existing = _find_match(gap, list(explanations))
    updated = [explanation for explanation in explanations if explanation is not existing]
    cleaned = reason.strip()
    if cleaned:
        explained_days = gap.days
        if existing is not None and existing.reason == cleaned:
            explained_days = existing.explained_days
        updated.append(
            GapExplanation(
                start_date=gap.start_date,
                end_date=gap.end_date,
                reason=cleaned,
                preceding_interval_id=gap.preceding_interval_id,
                explained_days=explained_days,
            )
        )
    return updated


def gaps_needing_review(
    gaps: Sequence[Gap], explanations: Sequence[GapExplanation]
) -> list[Gap]:
    """Return explained gaps that have grown since their reason was written."""

    return [item.gap for item in match_explanations(gaps, explanations) if item.needs_review]


def unexplained_gaps(
    gaps: Sequence[Gap], explanations: Sequence[GapExplanation]
) -> list[Gap]:
    """Return the gaps that have no matching explanation yet."""

    return [item.gap for item in match_explanations(gaps, explanations) if not item.is_explained]


def all_gaps_explained(gaps: Sequence[Gap], explanations: Sequence[GapExplanation]) -> bool:
    return not unexplained_gaps(gaps, explanations)


def require_all_gaps_explained(
    gaps: Sequence[Gap], explanations: Sequence[GapExplanation]
) -> None:
    """Raise :class:`UnexplainedGapsError` when any gap lacks an explanation."""

    missing = unexplained_gaps(gaps, explanations)
    if missing:
        raise UnexplainedGapsError(missing)


__all__ = [
    "all_gaps_explained",
    "gaps_needing_review",
    "match_explanations",
    "reconcile_explanations",
    "require_all_gaps_explained",
    "unexplained_gaps",
    "upsert_explanation",
]
