"""
Strategy routing for name fields.

Precedence: the country's strategy wins whenever the field actually contains
characters of that country's script; otherwise the detected script's strategy;
otherwise General. Every tier is one step of a fallback chain, so a strategy
that fails or raises simply hands the field to the next tier.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from latinym.paths import logger
from latinym.services.classification import ScriptClassificationService
from latinym.strategies.base import Step, TransliterationStrategy, run_fallback_chain
from latinym.strategies.general import GeneralStrategy
from latinym.tables.countries import country_group
from latinym.types import CountryGroup, FieldRole, MethodTag, ScriptTag, StepResult, TransliterationOutcome


class StrategyRouter:
    """Pick and run the strategy chain for one name field."""

    def __init__(
        self,
        classifier: ScriptClassificationService,
        strategies: Mapping[ScriptTag, TransliterationStrategy],
        general: GeneralStrategy,
    ):
        missing = [tag.value for tag in ScriptTag if tag is not ScriptTag.UNKNOWN and tag not in strategies]
        if missing:
            raise ValueError(f"no strategy registered for scripts: {', '.join(missing)}")

        self._classifier = classifier
        self._general = general
        self._strategies = MappingProxyType(dict(strategies))
        self._country_strategies = MappingProxyType({group: self._strategies[group.script] for group in CountryGroup})

    def strategy_for(self, script: ScriptTag) -> TransliterationStrategy:
        if script is ScriptTag.UNKNOWN:
            return self._general
        return self._strategies[script]

    def route(self, text: str, role: FieldRole, country: str, *, normalized: bool = False) -> TransliterationOutcome:
        detected = self._classifier.classify(text)
        group = country_group(country) if country else None
        country_strategy = self._country_strategies[group] if group is not None else None
        script_strategy = self._strategies.get(detected)

        steps: list[Step] = []
        if country_strategy is not None:
            steps.append(("country", lambda: self._run(country_strategy, text, role, normalized)))
        if script_strategy is not None and script_strategy is not country_strategy:
            steps.append(("script", lambda: self._run(script_strategy, text, role, normalized)))
        steps.append(("general", lambda: self._run_general(text, detected)))

        logger.debug(f"routing {text!r}: country={country or '-'} group={group} detected={detected.value}")
        result = run_fallback_chain(steps, label="router")
        if result.success:
            return result.outcome
        # General never fails; this only guards against a broken unidecode install
        return TransliterationOutcome(text, 0.1, MethodTag.FALLBACK_ORIGINAL, detected)

    def _run(self, strategy: TransliterationStrategy, text: str, role: FieldRole, normalized: bool) -> StepResult:
        if not strategy.accepts(text):
            logger.debug(f"{strategy!r} rejected {text!r}: script mismatch")
            return StepResult.failure(f"script mismatch for {strategy.script.value}")
        return strategy.transliterate(text, role, normalized=normalized).map(
            lambda outcome: outcome.with_script(strategy.script),
        )

    def _run_general(self, text: str, detected: ScriptTag) -> StepResult:
        return StepResult.success_with_outcome(self._general.fallback(text).with_script(detected))
