"""Pydantic models for employment history and derived gaps."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _new_interval_id() -> str:
    return uuid4().hex


def parse_iso_date(value: object) -> date | None:
    """Return ``value`` as a ``date``; blank values become ``None``.

    Accepts ``date``/``datetime`` objects and full ISO strings, either a
    plain date or a timestamp. Trailing text is never ignored.

    Raises:
        ValueError: If ``value`` cannot be read as a date.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid date value: {value!r}")
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError as exc:
        raise ValueError(f"Invalid date value: {value!r}") from exc


class EmploymentInterval(BaseModel):
    """Single employment period entered by the applicant.

    Attributes:
        id: Stable identifier assigned when the entry is created. Gap
            explanations anchor to it so they survive unrelated edits.
        employer: Free-text employer name; not unique.
        start_date: First day of the employment.
        end_date: Last day of the employment, if it has ended.
        is_current: Ongoing position; its end resolves to "today".
        worked_with_vulnerable: Role involved children or vulnerable adults.
    """

    id: str = Field(default_factory=_new_interval_id)
    employer: str = ""
    position: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    is_current: bool = False
    worked_with_vulnerable: bool = False
    reason_for_leaving: str | None = None
    reference_name: str | None = None
    reference_email: str | None = None
    reference_phone: str | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, value: object) -> date | None:
        return parse_iso_date(value)

    @property
    def is_valid_for_analysis(self) -> bool:
        """Return ``True`` when the entry carries enough dates for gap analysis."""

        return self.start_date is not None and (self.end_date is not None or self.is_current)

    def effective_end(self, today: date) -> date | None:
        """Return the end date used for gap analysis (``today`` when current)."""

        if self.is_current:
            return today
        return self.end_date


class Gap(BaseModel):
    """Uncovered date range between two employment intervals.

    Gaps are derived on every detection run and carry no identity of their
    own. ``preceding_index`` and ``following_index`` refer to positions in
    the caller-supplied interval sequence.
    """

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    days: int
    preceding_index: int
    preceding_interval_id: str
    following_index: int
    following_interval_id: str

    @property
    def range_key(self) -> tuple[date, date]:
        return (self.start_date, self.end_date)


class GapExplanation(BaseModel):
    """Applicant-provided reason for a detected gap; the persisted part of a gap.

    ``explained_days`` records the gap length when the reason was written,
    so a gap that later grows can be flagged for another look.
    """

    start_date: date
    end_date: date
    reason: str = Field(..., min_length=1)
    preceding_interval_id: str | None = None
    explained_days: int | None = None

    @field_validator("reason", mode="before")
    @classmethod
    def strip_reason(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @model_validator(mode="after")
    def check_range(self) -> "GapExplanation":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def range_key(self) -> tuple[date, date]:
        return (self.start_date, self.end_date)


class ExplainedGap(BaseModel):
    """A detected gap paired with its matching explanation, if any."""

    model_config = ConfigDict(frozen=True)

    gap: Gap
    explanation: GapExplanation | None = None

    @property
    def is_explained(self) -> bool:
        return self.explanation is not None

    @property
    def reason(self) -> str:
        return self.explanation.reason if self.explanation else ""

    @property
    def needs_review(self) -> bool:
        """Return ``True`` when the gap grew after its reason was written."""

        if self.explanation is None or self.explanation.explained_days is None:
            return False
        return self.gap.days > self.explanation.explained_days


def day_after(value: date) -> date:
    return value + timedelta(days=1)


def day_before(value: date) -> date:
    return value - timedelta(days=1)


__all__ = [
    "EmploymentInterval",
    "ExplainedGap",
    "Gap",
    "GapExplanation",
    "day_after",
    "day_before",
    "parse_iso_date",
]
