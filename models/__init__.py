"""Pydantic models for the application wizard."""

from .employment import EmploymentInterval, ExplainedGap, Gap, GapExplanation

__all__ = [
    "EmploymentInterval",
    "ExplainedGap",
    "Gap",
    "GapExplanation",
]
