from datetime import date
from pathlib import Path
import sys

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.employment import EmploymentInterval  # noqa: E402


class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture
def today() -> date:
    return date(2024, 6, 15)


@pytest.fixture
def make_job():
    """Build employment entries with readable ids."""

    def _make(
        interval_id: str,
        start: date | None,
        end: date | None = None,
        *,
        current: bool = False,
        **extra: object,
    ) -> EmploymentInterval:
        return EmploymentInterval(
            id=interval_id,
            employer=extra.pop("employer", interval_id.upper()),
            start_date=start,
            end_date=end,
            is_current=current,
            **extra,
        )

    return _make
