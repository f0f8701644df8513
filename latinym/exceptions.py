"""
Exception types for name romanization.

Only request validation and data loading raise. Conversion failures inside a
strategy are carried as failed StepResult values instead of exceptions.
"""
from __future__ import annotations


class LatinymError(Exception):
    """Base class for all latinym errors."""


class ValidationError(LatinymError, ValueError):
    """The request is structurally invalid (missing first name or country, bad country code)."""


class ConfigLoadError(LatinymError):
    """A bundled data file exists but cannot be parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")
