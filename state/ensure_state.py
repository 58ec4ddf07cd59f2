"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from types import MappingProxyType
from typing import Any, Callable
from uuid import uuid4

import streamlit as st

import config
from constants.keys import StateKeys
from models.employment import EmploymentInterval, GapExplanation


logger = logging.getLogger(__name__)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.EMPLOYMENT_ENTRIES: list,
        StateKeys.GAP_EXPLANATIONS: list,
        StateKeys.SESSION_TODAY: date.today,
        StateKeys.SESSION_ID: lambda: uuid4().hex,
        StateKeys.STEP: lambda: 0,
        "lang": lambda: config.DEFAULT_LANGUAGE,
    }
)


def ensure_state() -> None:
    """Seed ``st.session_state`` with defaults for missing keys.

    ``SESSION_TODAY`` is captured once per session so that gap detection
    resolves current positions against the same day on every rerun.
    """

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()


def get_intervals() -> list[EmploymentInterval]:
    ensure_state()
    return list(st.session_state[StateKeys.EMPLOYMENT_ENTRIES])


def set_intervals(intervals: list[EmploymentInterval]) -> None:
    st.session_state[StateKeys.EMPLOYMENT_ENTRIES] = list(intervals)


def get_explanations() -> list[GapExplanation]:
    ensure_state()
    return list(st.session_state[StateKeys.GAP_EXPLANATIONS])


def set_explanations(explanations: list[GapExplanation]) -> None:
    st.session_state[StateKeys.GAP_EXPLANATIONS] = list(explanations)


def session_today() -> date:
    ensure_state()
    return st.session_state[StateKeys.SESSION_TODAY]


def reset_state() -> None:
    """Reset ``st.session_state`` while preserving the language setting."""

    preserve = {"lang"}
    for key in list(st.session_state.keys()):
        if key not in preserve:
            del st.session_state[key]
    logger.info("Application session state reset")
    ensure_state()
