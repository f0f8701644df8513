"""
Common interface for script strategies and the fallback chain they run.

A strategy turns one name field into Latin text. Internally it is an ordered
list of steps, each returning a StepResult; the first successful step wins.
A step that raises is logged and counts as a failure, so a broken library only
ever costs one tier.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from latinym.paths import logger
from latinym.patterns import SCRIPT_PATTERNS
from latinym.services.formatting import NameFormattingService
from latinym.types import FieldRole, ScriptTag, StepResult

Step = tuple[str, Callable[[], StepResult]]


def run_fallback_chain(steps: Sequence[Step], label: str) -> StepResult:
    """Run ``steps`` in order and return the first success, or the last failure."""
    last = StepResult.failure(f"{label}: no steps")
    for name, step in steps:
        try:
            result = step()
        except Exception as e:
            logger.exception(f"{label}: step '{name}' raised: {e}")
            result = StepResult.failure(f"{name}: {e}")
        if result.success:
            return result
        logger.debug(f"{label}: step '{name}' failed: {result.error_message}")
        last = result
    return last


class TransliterationStrategy(ABC):
    """One writing system's romanization pipeline."""

    script: ScriptTag

    def __init__(self, formatter: NameFormattingService):
        self._formatter = formatter

    def accepts(self, text: str) -> bool:
        """True when ``text`` holds at least one character this strategy can read."""
        pattern = SCRIPT_PATTERNS.get(self.script)
        return pattern is not None and pattern.search(text) is not None

    @abstractmethod
    def transliterate(self, text: str, role: FieldRole, *, normalized: bool = False) -> StepResult:
        """Romanize one field. The result's outcome carries text, accuracy and method."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(script={self.script.value})"
