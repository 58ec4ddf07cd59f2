"""Core domain logic for the application wizard (Streamlit-free)."""

from .explanations import (
    all_gaps_explained,
    gaps_needing_review,
    match_explanations,
    reconcile_explanations,
    require_all_gaps_explained,
    unexplained_gaps,
    upsert_explanation,
)
from .gaps import detect_employment_gaps, detect_live_gaps, detect_reportable_gaps

__all__ = [
    "all_gaps_explained",
    "detect_employment_gaps",
    "detect_live_gaps",
    "detect_reportable_gaps",
    "gaps_needing_review",
    "match_explanations",
    "reconcile_explanations",
    "require_all_gaps_explained",
    "unexplained_gaps",
    "upsert_explanation",
]
