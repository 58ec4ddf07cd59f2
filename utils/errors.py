"""Streamlit rendering for errors the applicant can act on."""

from __future__ import annotations

import logging

import streamlit as st

from utils.i18n import tr_pair

logger = logging.getLogger(__name__)


def display_error(message: tuple[str, str], detail: str | None = None) -> None:
    """Show ``message`` in the session language and log ``detail``.

    ``detail`` (for example a snapshot validation error) is collapsed
    below the message so the applicant can see which field was rejected.
    """

    text = tr_pair(message)
    logger.warning("%s (%s)", text, detail or "no detail")
    st.error(text)
    if detail:
        with st.expander("Details"):
            st.code(detail)


__all__ = ["display_error"]
