from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

import config

_DEFAULT_LOG_FORMAT = (
    "%(asctime)s %(levelname)s [session=%(session_id)s step=%(wizard_step)s] "
    "%(name)s: %(message)s"
)

_session_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("session_id", default="-")
_wizard_step_var: contextvars.ContextVar[str] = contextvars.ContextVar("wizard_step", default="-")
_DEFAULT_RECORD_FACTORY = logging.getLogRecordFactory()
_RECORD_FACTORY_INSTALLED = False


def _apply_context(record: logging.LogRecord) -> None:
    record.session_id = _session_id_var.get("-")
    record.wizard_step = _wizard_step_var.get("-")


class _ContextFilter(logging.Filter):
    """Inject contextual fields into log records for consistent formatting."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        _apply_context(record)
        return True


def _coerce(value: str | None) -> str:
    if value is None:
        return "-"
    stripped = value.strip()
    return stripped or "-"


def configure_logging(*, level: int | str | None = None) -> None:
    """Ensure the root logger formats records with contextual metadata."""

    resolved_level = level if level is not None else config.LOG_LEVEL
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=resolved_level, format=_DEFAULT_LOG_FORMAT)
        root = logging.getLogger()
    for handler in root.handlers:
        formatter = handler.formatter or logging.Formatter(_DEFAULT_LOG_FORMAT)
        handler.setFormatter(formatter)
    has_filter = any(isinstance(flt, _ContextFilter) for flt in root.filters)
    if not has_filter:
        root.addFilter(_ContextFilter())
    global _RECORD_FACTORY_INSTALLED
    if not _RECORD_FACTORY_INSTALLED:
        default_factory = _DEFAULT_RECORD_FACTORY

        def _record_factory(*args: object, **kwargs: object) -> logging.LogRecord:
            record = default_factory(*args, **kwargs)
            _apply_context(record)
            return record

        logging.setLogRecordFactory(_record_factory)
        _RECORD_FACTORY_INSTALLED = True


def set_session_id(session_id: str | None) -> None:
    """Bind a session identifier for subsequent log records."""

    configure_logging()
    _session_id_var.set(_coerce(session_id))


def set_wizard_step(step: str | None) -> None:
    """Bind the current wizard step to the logging context."""

    _wizard_step_var.set(_coerce(step))


@contextmanager
def wizard_step_context(step: str | None) -> Iterator[None]:
    """Temporarily bind ``step`` to log records emitted inside the block."""

    token = _wizard_step_var.set(_coerce(step))
    try:
        yield
    finally:
        _wizard_step_var.reset(token)


def current_context() -> dict[str, str]:
    return {
        "session_id": _session_id_var.get("-"),
        "wizard_step": _wizard_step_var.get("-"),
    }


__all__ = [
    "configure_logging",
    "current_context",
    "set_session_id",
    "set_wizard_step",
    "wizard_step_context",
]
