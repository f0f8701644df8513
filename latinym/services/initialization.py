"""
Data initialization service for name romanization.

This module loads the bundled name dictionaries and curated pair overrides from
CSV files once, and freezes them into immutable structures shared by every
request. A missing or malformed file never stops startup: it is logged and
replaced by an empty table.
"""
from __future__ import annotations

import csv
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from latinym.exceptions import ConfigLoadError
from latinym.paths import logger
from latinym.services.formatting import NameFormattingService
from latinym.types import FieldRole, ScriptTag, TransliterationConfig

DICTIONARY_SOURCES = MappingProxyType(
    {
        ScriptTag.ARABIC: "arabic_names.csv",
        ScriptTag.JAPANESE: "japanese_names.csv",
        ScriptTag.KOREAN: "korean_names.csv",
    },
)

PAIR_OVERRIDE_SOURCE = "name_pairs.csv"

_DICTIONARY_COLUMNS = ("role", "native", "latin")
_PAIR_COLUMNS = ("country", "first_native", "last_native", "first_latin", "last_latin")
# First-name-only entries leave both last-name columns empty
_PAIR_REQUIRED = ("country", "first_native", "first_latin")
_ROLE_VALUES = {
    "first": (FieldRole.FIRST,),
    "last": (FieldRole.LAST,),
    "both": (FieldRole.FIRST, FieldRole.LAST),
}

_EMPTY: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class TransliterationData:
    """Immutable container for all loaded name data."""

    # (script, role) -> normalized native string -> canonical Latin spelling
    dictionaries: Mapping[tuple[ScriptTag, FieldRole], Mapping[str, str]]
    # (country, first, last) -> (first Latin, last Latin)
    pair_overrides: Mapping[tuple[str, str, str], tuple[str, str]]

    def dictionary(self, script: ScriptTag, role: FieldRole) -> Mapping[str, str]:
        return self.dictionaries.get((script, role), _EMPTY)

    def dictionary_sizes(self) -> dict[str, int]:
        return {f"{script.value}.{role.value}": len(d) for (script, role), d in self.dictionaries.items()}


class DataInitializationService:
    """Service to initialize all name data structures."""

    def __init__(self, config: TransliterationConfig, formatter: NameFormattingService):
        self._config = config
        self._formatter = formatter

    def initialize_data_structures(self) -> TransliterationData:
        """Initialize all immutable data structures."""
        dictionaries: dict[tuple[ScriptTag, FieldRole], Mapping[str, str]] = {}
        for script, filename in DICTIONARY_SOURCES.items():
            by_role = self._load_or_empty(filename, self._read_dictionary, {})
            for role in FieldRole:
                dictionaries[(script, role)] = MappingProxyType(by_role.get(role, {}))

        pair_overrides: Mapping[tuple[str, str, str], tuple[str, str]] = _EMPTY
        if self._config.enable_pair_overrides:
            pair_overrides = MappingProxyType(self._load_or_empty(PAIR_OVERRIDE_SOURCE, self._read_pairs, {}))

        return TransliterationData(
            dictionaries=MappingProxyType(dictionaries),
            pair_overrides=pair_overrides,
        )

    # ---------- internal ----------
    def _load_or_empty(self, filename: str, reader, empty):
        path = Path(self._config.data_dir) / filename
        if not path.exists():
            logger.warning(f"Name data file {path} not found; continuing with an empty table")
            return empty
        try:
            return reader(path)
        except ConfigLoadError as e:
            logger.warning(f"Failed to load name data ({e}); continuing with an empty table")
            return empty

    def _open_rows(
        self,
        path: Path,
        columns: tuple[str, ...],
        required: tuple[str, ...] | None = None,
    ) -> list[dict[str, str]]:
        try:
            with path.open(encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                missing = [c for c in columns if c not in (reader.fieldnames or ())]
                if missing:
                    raise ConfigLoadError(path.name, f"missing columns {missing}")
                rows = list(reader)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise ConfigLoadError(path.name, str(e)) from e

        for line_no, row in enumerate(rows, start=2):
            if any(not (row.get(c) or "").strip() for c in (required or columns)):
                raise ConfigLoadError(path.name, f"line {line_no}: empty value")
        return rows

    def _read_dictionary(self, path: Path) -> dict[FieldRole, dict[str, str]]:
        by_role: dict[FieldRole, dict[str, str]] = {role: {} for role in FieldRole}
        for line_no, row in enumerate(self._open_rows(path, _DICTIONARY_COLUMNS), start=2):
            roles = _ROLE_VALUES.get(row["role"].strip().lower())
            if roles is None:
                raise ConfigLoadError(path.name, f"line {line_no}: unknown role '{row['role']}'")
            key = self._formatter.lookup_key(row["native"])
            for role in roles:
                by_role[role][key] = row["latin"].strip()
        return by_role

    def _read_pairs(self, path: Path) -> dict[tuple[str, str, str], tuple[str, str]]:
        pairs = {}
        for line_no, row in enumerate(self._open_rows(path, _PAIR_COLUMNS, _PAIR_REQUIRED), start=2):
            last_native = (row["last_native"] or "").strip()
            last_latin = (row["last_latin"] or "").strip()
            if bool(last_native) != bool(last_latin):
                raise ConfigLoadError(path.name, f"line {line_no}: last_native and last_latin must be set together")
            key = (
                row["country"].strip().upper(),
                self._formatter.lookup_key(row["first_native"]),
                self._formatter.lookup_key(last_native),
            )
            pairs[key] = (row["first_latin"].strip(), last_latin)
        return pairs
