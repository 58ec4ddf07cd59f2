class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    LANG_SELECT = "ui.lang_select"
    STEP_SELECT = "ui.step_select"
    ADD_EMPLOYMENT = "ui.employment.add"
    EMPLOYMENT_PREFIX = "ui.employment"
    GAP_EXPLANATION_PREFIX = "ui.gap_explanation"
    SUMMARY_FORMAT = "ui.summary.format"
    SNAPSHOT_UPLOAD = "ui.snapshot.upload"

    @staticmethod
    def employment_field(interval_id: str, field: str) -> str:
        return f"{UIKeys.EMPLOYMENT_PREFIX}.{interval_id}.{field}"

    @staticmethod
    def gap_explanation(interval_id: str) -> str:
        return f"{UIKeys.GAP_EXPLANATION_PREFIX}.{interval_id}"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    EMPLOYMENT_ENTRIES = "data.employment_entries"
    GAP_EXPLANATIONS = "data.gap_explanations"
    SESSION_TODAY = "session.today"
    SESSION_ID = "session.id"
    STEP = "current_step"
