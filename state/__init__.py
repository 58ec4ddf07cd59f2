"""Session state utilities."""

from .ensure_state import ensure_state, reset_state

__all__ = ["ensure_state", "reset_state"]
