"""Address validation rules."""

from .rules import (
    COUNTRY_REQUIRED_MESSAGE,
    LINE_DETAIL_REQUIRED_MESSAGE,
    POSTAL_CODE_INVALID_MESSAGE,
    PROVINCE_REQUIRED_MESSAGE,
    is_valid_postal_code,
    province_required,
)

__all__ = [
    "PROVINCE_REQUIRED_MESSAGE",
    "COUNTRY_REQUIRED_MESSAGE",
    "LINE_DETAIL_REQUIRED_MESSAGE",
    "POSTAL_CODE_INVALID_MESSAGE",
    "is_valid_postal_code",
    "province_required",
]
