"""Registry for wizard steps and their canonical order."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

StepRenderer = Callable[[], None]


@dataclass(frozen=True)
class StepDefinition:
    """Metadata + rendering contract for an individual wizard step."""

    key: str
    label: tuple[str, str]
    renderer: StepRenderer

    def label_for(self, lang: str) -> str:
        """Return the localised label for the step."""

        if lang.lower().startswith("de"):
            return self.label[0]
        return self.label[1]


def _render_employment_step() -> None:
    from wizard.steps import employment_step

    employment_step.step_employment()


def _render_references_step() -> None:
    from wizard.steps import references_step

    references_step.step_references()


def _render_summary_step() -> None:
    from wizard.steps import summary_step

    summary_step.step_summary()


STEPS: Final[tuple[StepDefinition, ...]] = (
    StepDefinition("employment", ("Werdegang", "Employment history"), _render_employment_step),
    StepDefinition("references", ("Referenzen", "References"), _render_references_step),
    StepDefinition("summary", ("Zusammenfassung", "Summary"), _render_summary_step),
)


def get_step(key: str) -> StepDefinition:
    """Return the step registered under ``key``.

    Raises:
        KeyError: If no step uses ``key``.
    """

    for step in STEPS:
        if step.key == key:
            return step
    raise KeyError(key)


def step_keys() -> tuple[str, ...]:
    return tuple(step.key for step in STEPS)


__all__ = ["STEPS", "StepDefinition", "get_step", "step_keys"]
