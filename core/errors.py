"""Custom exception types for the application wizard."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from models.employment import Gap


class ApplicationError(Exception):
    """Base exception for application wizard issues."""


class UnexplainedGapsError(ApplicationError):
    """Raised when the applicant tries to continue with unexplained gaps."""

    def __init__(self, gaps: Sequence["Gap"]) -> None:
        self.gaps = tuple(gaps)
        super().__init__(f"{len(self.gaps)} employment gap(s) still need an explanation")


class SnapshotError(ApplicationError):
    """Raised when an imported application snapshot is invalid."""
