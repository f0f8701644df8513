"""
Configuration for name romanization.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from latinym.paths import DATA_PATH


@dataclass(frozen=True)
class TransliterationConfig:
    """Immutable configuration - Scala case class style."""

    data_dir: Path
    japanese_romaji_system: str
    japanese_normalized_system: str
    enable_japanese_engine: bool
    enable_korean_romanizer: bool
    enable_arabic_romanizer: bool
    enable_pinyin: bool
    warm_up_japanese: bool
    enable_pair_overrides: bool

    @classmethod
    def create_default(cls) -> TransliterationConfig:
        return cls(
            data_dir=DATA_PATH,
            japanese_romaji_system="hepburn",
            japanese_normalized_system="passport",
            enable_japanese_engine=True,
            enable_korean_romanizer=True,
            enable_arabic_romanizer=True,
            enable_pinyin=True,
            warm_up_japanese=True,
            enable_pair_overrides=True,
        )

    @classmethod
    def without_libraries(cls) -> TransliterationConfig:
        """Configuration using only bundled tables: every external converter disabled."""
        return cls.create_default().with_overrides(
            enable_japanese_engine=False,
            enable_korean_romanizer=False,
            enable_arabic_romanizer=False,
            enable_pinyin=False,
        )

    def with_overrides(self, **changes) -> TransliterationConfig:
        return replace(self, **changes)
