"""Wizard helpers package."""

from __future__ import annotations

import streamlit as st

from constants.keys import StateKeys, UIKeys
from state.ensure_state import ensure_state
from utils.logging_context import set_session_id, wizard_step_context

from .step_registry import STEPS, get_step


def run_wizard() -> None:
    """Render the step selector and the selected step."""

    ensure_state()
    set_session_id(st.session_state[StateKeys.SESSION_ID])
    lang = st.session_state.get("lang", "en")
    keys = [step.key for step in STEPS]
    selected = st.sidebar.radio(
        "Steps",
        keys,
        format_func=lambda key: get_step(key).label_for(lang),
        key=UIKeys.STEP_SELECT,
        label_visibility="collapsed",
    )
    st.session_state[StateKeys.STEP] = keys.index(selected)
    with wizard_step_context(selected):
        get_step(selected).renderer()


__all__ = ["run_wizard"]
