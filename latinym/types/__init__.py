"""
Types package for name romanization.

This package contains the tag enums, request and result types, and the
configuration class used throughout the romanization pipeline.
"""

from latinym.types.config import TransliterationConfig
from latinym.types.request import NameRequest
from latinym.types.results import (
    EngineStatus,
    StepResult,
    TransliterationOutcome,
    TransliterationResult,
    round_accuracy,
)
from latinym.types.tags import CountryGroup, FieldRole, MethodTag, ScriptTag

__all__ = [
    "CountryGroup",
    "EngineStatus",
    "FieldRole",
    "MethodTag",
    "NameRequest",
    "ScriptTag",
    "StepResult",
    "TransliterationConfig",
    "TransliterationOutcome",
    "TransliterationResult",
    "round_accuracy",
]
