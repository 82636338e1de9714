"""Field-level checks applied to address records."""

from __future__ import annotations

import re

ZA_COUNTRY_CODE = "ZA"

PROVINCE_REQUIRED_MESSAGE = "You must include a province if your country is ZA"
COUNTRY_REQUIRED_MESSAGE = "You must include a country"
LINE_DETAIL_REQUIRED_MESSAGE = (
    "You must include valid address details (line 1 and/or 2 must be filled in)"
)
POSTAL_CODE_INVALID_MESSAGE = "You must include a valid postal code"

_POSTAL_CODE_PATTERN = re.compile(r"\d+")


def is_valid_postal_code(value: str) -> bool:
    """Return True if the postal code is made of digits only."""
    return _POSTAL_CODE_PATTERN.fullmatch(value) is not None


def province_required(country_code: str) -> bool:
    return country_code == ZA_COUNTRY_CODE
