"""Snapshot export/import for the employment section of an application.

Only the applicant's entries and their gap explanations are stored; gaps
themselves are recomputed after loading.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import ValidationError

from core.errors import SnapshotError
from models.employment import EmploymentInterval, GapExplanation

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1

AutosavePayload = dict[str, Any]


def build_snapshot(
    intervals: Sequence[EmploymentInterval],
    explanations: Sequence[GapExplanation],
    *,
    lang: str | None = None,
) -> AutosavePayload:
    """Return a JSON-serialisable snapshot that can be exported or restored later."""

    meta: dict[str, Any] = {
        "version": SNAPSHOT_VERSION,
        "captured_at": datetime.now(timezone.utc).isoformat(),
    }
    if lang:
        meta["lang"] = lang
    return {
        "employment": [interval.model_dump(mode="json") for interval in intervals],
        "gap_explanations": [
            explanation.model_dump(mode="json") for explanation in explanations
        ],
        "meta": meta,
    }


def _coerce_list(payload: Mapping[str, Any], key: str) -> list[Any]:
    value = payload.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise SnapshotError(f"Snapshot field '{key}' must be a list")
    return value


def parse_snapshot(
    payload: Mapping[str, Any] | str | bytes,
) -> tuple[list[EmploymentInterval], list[GapExplanation]]:
    """Validate a snapshot and return its intervals and explanations.

    Raises:
        SnapshotError: If the payload is not valid JSON or does not match
            the snapshot layout.
    """

    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise SnapshotError(f"Snapshot is not valid UTF-8 JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise SnapshotError("Snapshot must be a JSON object")

    try:
        intervals = [
            EmploymentInterval.model_validate(item)
            for item in _coerce_list(payload, "employment")
        ]
        explanations = [
            GapExplanation.model_validate(item)
            for item in _coerce_list(payload, "gap_explanations")
        ]
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot: {exc}") from exc

    logger.info(
        "Loaded snapshot with %d employment entr(y/ies) and %d explanation(s)",
        len(intervals),
        len(explanations),
    )
    return intervals, explanations


def snapshot_to_json(snapshot: AutosavePayload) -> bytes:
    return json.dumps(snapshot, ensure_ascii=False, indent=2).encode("utf-8")


__all__ = ["build_snapshot", "parse_snapshot", "snapshot_to_json"]
