"""Date formatting shared by the wizard steps and the summary export."""

from __future__ import annotations

from datetime import date


def format_date(value: date | None, *, placeholder: str = "") -> str:
    """Render ``value`` as ``DD/MM/YYYY`` for summaries."""

    if value is None:
        return placeholder
    return value.strftime("%d/%m/%Y")


__all__ = ["format_date"]
