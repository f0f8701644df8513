"""
Result types for name romanization.

This module contains the per-field outcome, the Either-like step result that
strategies return to the fallback chain, and the immutable response envelope.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from latinym.types.tags import MethodTag, ScriptTag


def round_accuracy(value: float) -> float:
    """Round to two places, halves away from zero (0.875 -> 0.88)."""
    # Absorb binary noise (0.92499999999 -> 0.925) before rounding
    return float(Decimal(str(round(value, 9))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class TransliterationOutcome:
    """Romanized text for one name field, with its confidence and provenance."""

    text: str
    accuracy: float
    method: MethodTag
    script: ScriptTag | None = None

    def with_text(self, text: str) -> TransliterationOutcome:
        return TransliterationOutcome(text, self.accuracy, self.method, self.script)

    def with_script(self, script: ScriptTag) -> TransliterationOutcome:
        return TransliterationOutcome(self.text, self.accuracy, self.method, script)

    @classmethod
    def empty(cls) -> TransliterationOutcome:
        return cls(text="", accuracy=0.95, method=MethodTag.EMPTY)


@dataclass(frozen=True)
class StepResult:
    """Result of one fallback step - Scala Either-like structure."""

    success: bool
    outcome: TransliterationOutcome | None
    error_message: str | None = None

    @classmethod
    def success_with_outcome(cls, outcome: TransliterationOutcome) -> StepResult:
        return cls(success=True, outcome=outcome, error_message=None)

    @classmethod
    def success_with(cls, text: str, accuracy: float, method: MethodTag) -> StepResult:
        return cls.success_with_outcome(TransliterationOutcome(text, accuracy, method))

    @classmethod
    def failure(cls, error_message: str) -> StepResult:
        return cls(success=False, outcome=None, error_message=error_message)

    def map(self, f) -> StepResult:
        """Transform the outcome of a successful step; exceptions turn into failures."""
        if self.success:
            try:
                return StepResult.success_with_outcome(f(self.outcome))
            except Exception as e:
                return StepResult.failure(str(e))
        return self

    def flat_map(self, f) -> StepResult:
        """Chain a step that may itself fail."""
        if self.success:
            try:
                return f(self.outcome)
            except Exception as e:
                return StepResult.failure(str(e))
        return self


@dataclass(frozen=True)
class TransliterationResult:
    """Romanized first and last name plus the averaged confidence."""

    first_name: TransliterationOutcome
    last_name: TransliterationOutcome
    country: str
    overall_accuracy: float

    @classmethod
    def compose(
        cls,
        first_name: TransliterationOutcome,
        last_name: TransliterationOutcome,
        country: str,
    ) -> TransliterationResult:
        average = (first_name.accuracy + last_name.accuracy) / 2
        return cls(first_name, last_name, country, round_accuracy(average))

    @property
    def method(self) -> MethodTag:
        """Representative method for simple consumers: the first name's."""
        return self.first_name.method

    def to_dict(self) -> dict:
        def _script(outcome: TransliterationOutcome) -> str | None:
            return outcome.script.value if outcome.script is not None else None

        return {
            "firstName": self.first_name.text,
            "lastName": self.last_name.text,
            "country": self.country,
            "accuracy": self.overall_accuracy,
            "method": self.method.value,
            "details": {
                "firstNameMethod": self.first_name.method.value,
                "lastNameMethod": self.last_name.method.value,
                "firstNameAccuracy": self.first_name.accuracy,
                "lastNameAccuracy": self.last_name.accuracy,
                "firstNameScript": _script(self.first_name),
                "lastNameScript": _script(self.last_name),
            },
        }


@dataclass(frozen=True)
class EngineStatus:
    """Immutable snapshot of which conversion libraries are usable."""

    japanese_engine_initialized: bool
    korean_romanizer_available: bool
    arabic_romanizer_available: bool
    pinyin_available: bool
    dictionary_sizes: dict[str, int]
