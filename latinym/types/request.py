"""
Request type for name romanization.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from latinym.exceptions import ValidationError

_COUNTRY_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")


@dataclass(frozen=True)
class NameRequest:
    """A name to romanize, tagged with the ISO 3166 alpha-2 country it comes from."""

    first_name: str
    last_name: str = ""
    country: str = ""
    # Japanese only: use the macron-free romaji system and strip long-vowel marks
    normalized: bool = False

    def validate(self) -> None:
        """Reject requests the core cannot process at all."""
        if not self.first_name or not self.first_name.strip():
            raise ValidationError("firstName is required")
        if not self.country or not self.country.strip():
            raise ValidationError("country is required")

    @classmethod
    def from_payload(cls, payload: Mapping) -> NameRequest:
        """
        Build a request from a JSON-style payload the way the HTTP layer does:
        trim every field, upper-case the country and require a two-letter code.
        """
        first_name = payload.get("firstName")
        country = payload.get("country")
        if not isinstance(first_name, str) or not first_name.strip():
            raise ValidationError("firstName is required")
        if not isinstance(country, str) or not country.strip():
            raise ValidationError("country is required")

        last_name = payload.get("lastName") or ""
        if not isinstance(last_name, str):
            raise ValidationError("lastName must be a string")

        country = country.strip().upper()
        if not _COUNTRY_CODE_PATTERN.match(country):
            raise ValidationError(f"country must be a 2-letter ISO code, got '{country}'")

        return cls(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            country=country,
            normalized=bool(payload.get("normalized", False)),
        )
