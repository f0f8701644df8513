"""
Adapters around the external romanization libraries.

Each adapter owns one library instance, reports whether it is usable, and
raises on conversion problems so that the calling strategy can fall through to
its next tier. A library that fails to initialize is logged and left disabled;
it never stops the service from starting.
"""
from __future__ import annotations

import asyncio

import pykakasi
import uroman as ur
from korean_romanizer.romanizer import Romanizer

from latinym.paths import logger
from latinym.types import TransliterationConfig

# ════════════════════════════════════════════════════════════════════════════════
# JAPANESE
# ════════════════════════════════════════════════════════════════════════════════


class KakasiRomanizer:
    """Kanji/kana to romaji through pykakasi, with a one-time warm-up."""

    SYSTEMS = ("hepburn", "kunrei", "passport")

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._kakasi = None
        self.failed = False

    @property
    def is_initialized(self) -> bool:
        return self._kakasi is not None

    def warm_up(self) -> bool:
        """Build the converter and its dictionaries. Safe to call more than once."""
        if not self.enabled or self.failed:
            return False
        if self._kakasi is not None:
            return True
        try:
            kakasi = pykakasi.kakasi()
            # Touch the dictionaries so the first real request does not pay for loading them
            kakasi.convert("山田")
        except Exception as e:
            logger.exception(f"Failed to initialize the Japanese romanization engine: {e}")
            self.failed = True
            return False
        self._kakasi = kakasi
        logger.info("Japanese romanization engine initialized")
        return True

    async def warm_up_async(self) -> bool:
        return await asyncio.to_thread(self.warm_up)

    def romanize(self, text: str, system: str = "hepburn") -> str:
        """Space-separated romaji for ``text`` in the requested system."""
        if system not in self.SYSTEMS:
            raise ValueError(f"unknown romaji system '{system}'")
        kakasi = self._kakasi
        if kakasi is None:
            raise RuntimeError("Japanese romanization engine is not initialized")
        return " ".join(item[system] for item in kakasi.convert(text) if item.get(system))


# ════════════════════════════════════════════════════════════════════════════════
# KOREAN
# ════════════════════════════════════════════════════════════════════════════════


class HangulRomanizer:
    """Revised Romanization of Hangul through korean-romanizer."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def is_available(self) -> bool:
        return self.enabled

    def romanize(self, text: str) -> str:
        if not self.enabled:
            raise RuntimeError("Korean romanizer is disabled")
        return Romanizer(text).romanize()


# ════════════════════════════════════════════════════════════════════════════════
# ARABIC
# ════════════════════════════════════════════════════════════════════════════════


class UromanRomanizer:
    """Arabic-script romanization through uroman."""

    def __init__(self, enabled: bool = True):
        self.enabled = False
        self._uroman = None
        if not enabled:
            return
        try:
            self._uroman = ur.Uroman()
            self.enabled = True
        except Exception as e:
            logger.exception(f"Failed to initialize the Arabic romanizer: {e}")

    def is_available(self) -> bool:
        return self.enabled and self._uroman is not None

    def romanize(self, text: str) -> str:
        if not self.is_available():
            raise RuntimeError("Arabic romanizer is not available")
        return self._uroman.romanize_string(text)


# ════════════════════════════════════════════════════════════════════════════════
# FACTORIES
# ════════════════════════════════════════════════════════════════════════════════


def create_japanese_engine(config: TransliterationConfig) -> KakasiRomanizer:
    """Factory function to create the Japanese engine, warmed up unless the config defers it."""
    engine = KakasiRomanizer(enabled=config.enable_japanese_engine)
    if config.warm_up_japanese:
        engine.warm_up()
    return engine


def create_korean_romanizer(config: TransliterationConfig) -> HangulRomanizer:
    return HangulRomanizer(enabled=config.enable_korean_romanizer)


def create_arabic_romanizer(config: TransliterationConfig) -> UromanRomanizer:
    return UromanRomanizer(enabled=config.enable_arabic_romanizer)
