"""Simple i18n helper utilities."""

from __future__ import annotations

from typing import Final

import streamlit as st

import config


EMPLOYMENT_STEP_TITLE: Final[tuple[str, str]] = (
    "Beruflicher Werdegang",
    "Employment history",
)
EMPLOYMENT_STEP_INTRO: Final[tuple[str, str]] = (
    "Bitte alle Beschäftigungen angeben. Lücken zwischen zwei Stellen müssen erläutert werden.",
    "Please list all employment. Any gap between two positions needs an explanation.",
)
GAP_DETECTED_LABEL: Final[tuple[str, str]] = (
    "Lücke von {days} Tagen ({start} – {end})",
    "Gap of {days} days ({start} – {end})",
)
GAP_EXPLANATION_LABEL: Final[tuple[str, str]] = (
    "Was haben Sie in diesem Zeitraum gemacht?",
    "What were you doing during this period?",
)
GAPS_UNEXPLAINED_WARNING: Final[tuple[str, str]] = (
    "{count} Lücke(n) im Werdegang sind noch nicht erläutert.",
    "{count} gap(s) in your employment history still need an explanation.",
)
REFERENCES_STEP_TITLE: Final[tuple[str, str]] = (
    "Referenzen",
    "References",
)
REFERENCES_EMPTY_WARNING: Final[tuple[str, str]] = (
    "Keine Beschäftigungen gefunden. Bitte zuerst den Werdegang ausfüllen.",
    "No employment history found. Please complete the employment history section first.",
)
SUMMARY_STEP_TITLE: Final[tuple[str, str]] = (
    "Zusammenfassung",
    "Summary",
)
SUMMARY_UNEXPLAINED_MARKER: Final[tuple[str, str]] = (
    "nicht erläutert",
    "not explained",
)
GAP_REVIEW_HINT: Final[tuple[str, str]] = (
    "Die Lücke ist länger geworden, seit Sie sie erläutert haben. Bitte prüfen.",
    "This gap has grown since you explained it. Please check your explanation.",
)
SUMMARY_REVIEW_MARKER: Final[tuple[str, str]] = (
    "bitte prüfen",
    "needs review",
)
PRESENT_LABEL: Final[tuple[str, str]] = (
    "heute",
    "present",
)


def tr(de: str, en: str, lang: str | None = None) -> str:
    """Return the string matching the current language.

    Args:
        de: German text.
        en: English text.
        lang: Optional language override (``"de"`` or ``"en"``).

    Returns:
        The localized string for the requested language.
    """
    code = lang or st.session_state.get("lang", config.DEFAULT_LANGUAGE)
    return de if code == "de" else en


def tr_pair(pair: tuple[str, str], lang: str | None = None) -> str:
    """Return the localized entry of a ``(de, en)`` constant."""

    return tr(pair[0], pair[1], lang=lang)
