# app.py: carer application wizard entrypoint
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

import config  # noqa: E402
from constants.keys import UIKeys  # noqa: E402
from state import ensure_state  # noqa: E402
from utils.logging_context import configure_logging  # noqa: E402
from wizard import run_wizard  # noqa: E402

configure_logging()

st.set_page_config(
    page_title=config.APP_TITLE,
    page_icon="🧭",
    layout="wide",
    initial_sidebar_state="expanded",
)

ensure_state()

lang = st.sidebar.selectbox(
    "Language / Sprache",
    config.SUPPORTED_LANGUAGES,
    index=config.SUPPORTED_LANGUAGES.index(st.session_state.get("lang", config.DEFAULT_LANGUAGE)),
    key=UIKeys.LANG_SELECT,
)
st.session_state["lang"] = lang

st.title(config.APP_TITLE)
run_wizard()
