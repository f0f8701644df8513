"""
Services package for name romanization.

This package contains the service classes used by the romanization pipeline,
organized by domain responsibility. Routing lives in
``latinym.services.routing`` and is imported from there, since it depends on
the strategies that themselves build on these services.
"""

from latinym.services.cache import PinyinCacheService
from latinym.services.classification import ScriptClassificationService
from latinym.services.engines import (
    HangulRomanizer,
    KakasiRomanizer,
    UromanRomanizer,
    create_arabic_romanizer,
    create_japanese_engine,
    create_korean_romanizer,
)
from latinym.services.formatting import NameFormattingService
from latinym.services.initialization import DataInitializationService, TransliterationData
from latinym.types import EngineStatus, TransliterationConfig

__all__ = [
    # Types (re-exported for compatibility)
    "EngineStatus",
    "TransliterationConfig",
    # Data structures
    "DataInitializationService",
    "TransliterationData",
    # Services
    "NameFormattingService",
    "PinyinCacheService",
    "ScriptClassificationService",
    # Library adapters
    "HangulRomanizer",
    "KakasiRomanizer",
    "UromanRomanizer",
    "create_arabic_romanizer",
    "create_japanese_engine",
    "create_korean_romanizer",
]
