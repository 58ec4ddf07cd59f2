from __future__ import annotations

import streamlit as st

import config
from constants.keys import UIKeys
from core.errors import SnapshotError
from exports.summary import render_employment_summary
from state.autosave import build_snapshot, parse_snapshot, snapshot_to_json
from state.ensure_state import (
    get_explanations,
    get_intervals,
    session_today,
    set_explanations,
    set_intervals,
)
from utils.errors import display_error
from utils.export import prepare_download_data
from utils.i18n import SUMMARY_STEP_TITLE, tr, tr_pair

__all__ = ["step_summary"]

_FORMATS = ("pdf", "docx", "md")
_LOADED_SNAPSHOT_KEY = "_loaded_snapshot_file_id"


def step_summary() -> None:
    """Show the application summary with download and snapshot controls."""

    lang = st.session_state.get("lang", config.DEFAULT_LANGUAGE)
    intervals = get_intervals()
    explanations = get_explanations()
    summary = render_employment_summary(
        intervals, explanations, today=session_today(), lang=lang
    )

    st.header(tr_pair(SUMMARY_STEP_TITLE))
    st.markdown(summary)

    fmt = st.selectbox(tr("Format", "Format"), _FORMATS, key=UIKeys.SUMMARY_FORMAT)
    data, mime, ext = prepare_download_data(
        summary, fmt, key="employment_summary", title=config.APP_TITLE
    )
    st.download_button(
        tr("Zusammenfassung herunterladen", "Download summary"),
        data=data,
        file_name=f"application_summary.{ext}",
        mime=mime,
    )

    st.divider()
    st.download_button(
        tr("Zwischenstand speichern", "Save progress"),
        data=snapshot_to_json(build_snapshot(intervals, explanations, lang=lang)),
        file_name="application_snapshot.json",
        mime="application/json",
    )
    uploaded = st.file_uploader(
        tr("Zwischenstand laden", "Load saved progress"),
        type=["json"],
        key=UIKeys.SNAPSHOT_UPLOAD,
    )
    if uploaded is not None and st.session_state.get(_LOADED_SNAPSHOT_KEY) != uploaded.file_id:
        try:
            loaded_intervals, loaded_explanations = parse_snapshot(uploaded.getvalue())
        except SnapshotError as exc:
            display_error(
                ("Die Datei konnte nicht geladen werden.", "The file could not be loaded."),
                detail=str(exc),
            )
        else:
            set_intervals(loaded_intervals)
            set_explanations(loaded_explanations)
            st.session_state[_LOADED_SNAPSHOT_KEY] = uploaded.file_id
            st.success(tr("Zwischenstand geladen.", "Saved progress loaded."))
