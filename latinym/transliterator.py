"""
Personal Name Romanization Module

This module converts personal names written in non-Latin scripts into a Latin
rendering, together with a heuristic confidence score and the method that
produced it.

## Overview

The core functionality is provided by the `NameTransliterator` class, which runs
each name field through a routing pipeline:

1. **Script Classification**: Codepoint ranges decide the field's writing system
2. **Strategy Routing**: Country group first, then detected script, then General
3. **Per-Script Fallback Chains**: Dictionary → library → character map → placeholder
4. **Result Composition**: Averaged confidence and a JSON-style envelope

## Architecture

### Clean Service Separation
- **ScriptClassificationService**: Pure script detection with a fixed priority order
- **DataInitializationService**: Immutable dictionaries loaded once from bundled CSV
- **PinyinCacheService**: Memoised Han to Pinyin conversion
- **KakasiRomanizer / HangulRomanizer / UromanRomanizer**: Library adapters
- **StrategyRouter**: Country/script precedence over the strategy table
- **NameTransliterator**: Main engine with dependency injection

### Scala-Compatible Design
- **Immutable Data Structures**: Tables are frozen after startup, shared by reference
- **Functional Error Handling**: StepResult with Either-like success/failure semantics
- **Exhaustive Dispatch**: Every ScriptTag has a strategy, checked at construction

## Supported Scripts

| Script      | Strategy chain                                              | Best accuracy |
|-------------|-------------------------------------------------------------|---------------|
| Arabic      | dictionary, per-word dictionary, uroman, letter map, `?`    | 0.98          |
| Japanese    | dictionary, pykakasi, static names, kana table              | 0.95          |
| Korean      | dictionary, korean-romanizer, static names, syllable table  | 0.95          |
| Chinese     | pypinyin with surname readings                              | 0.9           |
| Cyrillic    | letter map                                                  | 0.9           |
| Greek       | letter map with digraphs                                    | 0.9           |
| Devanagari  | letter map with matras and conjuncts                        | 0.8           |
| Thai        | letter map                                                  | 0.7           |
| Latin       | diacritic folding or passthrough                            | 0.98          |
| other       | unidecode, or the untouched original                        | 0.6           |

## Usage Examples

```python
from latinym import NameRequest, NameTransliterator

transliterator = NameTransliterator()

result = transliterator.transliterate_sync(NameRequest("محمد", "علي", "EG"))
# result.first_name.text == "Mohammed", result.overall_accuracy == 0.98

result = transliterator.transliterate_sync(NameRequest("José", "García", "ES"))
# result.method == MethodTag.DIACRITIC_NORMALIZATION

# Async entry point, and the JSON envelope
result = await transliterator.transliterate(NameRequest.from_payload(payload))
envelope = result.to_dict()
```

## Routing Precedence

The country hint wins whenever the field actually contains characters of that
country's script; otherwise the detected script wins; otherwise General. A JP
name written in Han goes to the Japanese strategy, the same characters with no
country go to Chinese, and a Latin name tagged JP passes through unchanged.

## Error Handling

Only request validation raises (`ValidationError` for a missing first name or
country). Library failures, script mismatches and unexpected strategy errors
move the field to the next tier, and General always produces an answer.

## Thread Safety

Nothing mutates shared state after construction. The Japanese engine can be
warmed up later (`warm_up_japanese=False`, then `await warm_up()`); until then
Japanese fields deterministically use the static fallback.
"""
from __future__ import annotations

from latinym.paths import logger
from latinym.services import (
    DataInitializationService,
    EngineStatus,
    HangulRomanizer,
    KakasiRomanizer,
    NameFormattingService,
    PinyinCacheService,
    ScriptClassificationService,
    TransliterationConfig,
    TransliterationData,
    UromanRomanizer,
    create_arabic_romanizer,
    create_japanese_engine,
    create_korean_romanizer,
)
from latinym.services.routing import StrategyRouter
from latinym.strategies import (
    ArabicStrategy,
    ChineseStrategy,
    GeneralStrategy,
    JapaneseStrategy,
    KoreanStrategy,
    LatinStrategy,
    create_character_map_strategies,
)
from latinym.types import (
    FieldRole,
    MethodTag,
    NameRequest,
    ScriptTag,
    TransliterationOutcome,
    TransliterationResult,
)

# ════════════════════════════════════════════════════════════════════════════════
# MAIN NAME TRANSLITERATOR CLASS
# ════════════════════════════════════════════════════════════════════════════════


class NameTransliterator:
    """Main name romanization service."""

    def __init__(
        self,
        config: TransliterationConfig | None = None,
        *,
        japanese_engine: KakasiRomanizer | None = None,
        korean_romanizer: HangulRomanizer | None = None,
        arabic_romanizer: UromanRomanizer | None = None,
    ):
        self._config = config or TransliterationConfig.create_default()
        self._formatter = NameFormattingService()
        self._classifier = ScriptClassificationService()
        self._data_service = DataInitializationService(self._config, self._formatter)
        self._cache_service = PinyinCacheService(self._config)

        self._japanese_engine = japanese_engine or create_japanese_engine(self._config)
        self._korean_romanizer = korean_romanizer or create_korean_romanizer(self._config)
        self._arabic_romanizer = arabic_romanizer or create_arabic_romanizer(self._config)

        self._data: TransliterationData = self._data_service.initialize_data_structures()
        self._router = self._build_router()
        logger.info(f"Name transliterator ready: {self._data.dictionary_sizes()}")

    def _build_router(self) -> StrategyRouter:
        formatter = self._formatter
        strategies = {
            ScriptTag.ARABIC: ArabicStrategy(formatter, self._data, self._arabic_romanizer),
            ScriptTag.JAPANESE: JapaneseStrategy(formatter, self._data, self._japanese_engine, self._config),
            ScriptTag.KOREAN: KoreanStrategy(formatter, self._data, self._korean_romanizer),
            ScriptTag.CHINESE: ChineseStrategy(formatter, self._cache_service),
            ScriptTag.LATIN: LatinStrategy(formatter),
            **create_character_map_strategies(formatter),
        }
        return StrategyRouter(self._classifier, strategies, GeneralStrategy(formatter))

    # Public API methods
    async def warm_up(self) -> bool:
        """Initialize the Japanese engine off the event loop. Returns whether it is ready."""
        return await self._japanese_engine.warm_up_async()

    def engine_status(self) -> EngineStatus:
        return EngineStatus(
            japanese_engine_initialized=self._japanese_engine.is_initialized,
            korean_romanizer_available=self._korean_romanizer.is_available(),
            arabic_romanizer_available=self._arabic_romanizer.is_available(),
            pinyin_available=self._cache_service.is_available(),
            dictionary_sizes=self._data.dictionary_sizes(),
        )

    async def transliterate(self, request: NameRequest) -> TransliterationResult:
        """
        Main API method: romanize both fields of a name.

        Raises ValidationError for a missing first name or country; any other
        problem lowers the confidence instead of failing the request.
        """
        return self.transliterate_sync(request)

    def transliterate_sync(self, request: NameRequest) -> TransliterationResult:
        request.validate()
        country = request.country.strip().upper()
        first_name = request.first_name.strip()
        last_name = request.last_name.strip() if request.last_name else ""

        curated = self._curated_pair(country, first_name, last_name)
        if curated is not None:
            return curated

        first = self._router.route(first_name, FieldRole.FIRST, country, normalized=request.normalized)
        if last_name:
            last = self._router.route(last_name, FieldRole.LAST, country, normalized=request.normalized)
        else:
            last = TransliterationOutcome.empty()
        return TransliterationResult.compose(first, last, country)

    def _curated_pair(self, country: str, first_name: str, last_name: str) -> TransliterationResult | None:
        if not self._data.pair_overrides:
            return None
        key = (country, self._formatter.lookup_key(first_name), self._formatter.lookup_key(last_name))
        pair = self._data.pair_overrides.get(key)
        if pair is None:
            return None

        logger.debug(f"curated pair override for {key}")
        first = TransliterationOutcome(
            pair[0],
            1.0,
            MethodTag.CURATED_PAIR_MATCH,
            self._classifier.classify(first_name),
        )
        if not last_name:
            return TransliterationResult.compose(first, TransliterationOutcome.empty(), country)
        last = TransliterationOutcome(
            pair[1],
            1.0,
            MethodTag.CURATED_PAIR_MATCH,
            self._classifier.classify(last_name),
        )
        return TransliterationResult.compose(first, last, country)
