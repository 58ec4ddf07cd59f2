"""Central configuration for the carer application wizard.

Values are read from the environment (optionally via a ``.env`` file) when
the module is imported:

``LIVE_GAP_THRESHOLD_DAYS``
    Smallest uncovered period, in days, flagged while the applicant edits
    the employment history. Defaults to ``1`` so every missing day shows up.
``REFERENCE_GAP_THRESHOLD_DAYS``
    Smallest gap relevant for reference requests and compliance reporting.
    Defaults to ``31`` (one month).
``LANGUAGE``
    Default UI language (``en`` or ``de``).
``LOG_LEVEL``
    Root logging level used by :func:`utils.logging_context.configure_logging`.
"""

import logging
import os
import warnings

from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)

DEFAULT_LIVE_GAP_THRESHOLD_DAYS = 1
DEFAULT_REFERENCE_GAP_THRESHOLD_DAYS = 31
SUPPORTED_LANGUAGES = ("en", "de")
APP_TITLE = "Carer Application"


def _read_threshold(name: str, default: int) -> int:
    """Return a positive day threshold from ``name`` or ``default`` when invalid."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        warnings.warn(
            "Invalid %s '%s'; falling back to %d." % (name, raw, default),
            RuntimeWarning,
        )
        return default
    if value < 1:
        logger.info("%s=%d is below one day; using 1 instead.", name, value)
        return 1
    return value


def _normalise_language(value: str | None) -> str:
    candidate = (value or "").strip().lower()
    if candidate in SUPPORTED_LANGUAGES:
        return candidate
    return "en"


LIVE_GAP_THRESHOLD_DAYS = _read_threshold(
    "LIVE_GAP_THRESHOLD_DAYS", DEFAULT_LIVE_GAP_THRESHOLD_DAYS
)
REFERENCE_GAP_THRESHOLD_DAYS = _read_threshold(
    "REFERENCE_GAP_THRESHOLD_DAYS", DEFAULT_REFERENCE_GAP_THRESHOLD_DAYS
)
DEFAULT_LANGUAGE = _normalise_language(os.getenv("LANGUAGE"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
