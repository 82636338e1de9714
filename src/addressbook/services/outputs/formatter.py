"""Utilities to render addresses and validation reports as text."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Iterable, Optional, Sequence, TextIO

from ...config import settings

if TYPE_CHECKING:
    from ...models.domain import Address, LineDetail


def str_or(value: str, default: str) -> str:
    """Return ``value`` unless it is empty, in which case return ``default``."""
    return value if value else default


def format_line_detail(line_detail: "LineDetail", placeholder: Optional[str] = None) -> str:
    placeholder = placeholder if placeholder is not None else settings.not_available_label
    line1, line2 = line_detail.line1, line_detail.line2
    if not line1 and not line2:
        return placeholder
    if not line1:
        return line2
    if not line2:
        return line1
    return f"{line1}, {line2}"


def format_address(address: "Address", placeholder: Optional[str] = None) -> str:
    """Render an address as a single display line.

    Layout: ``<type>: <lines> - <city> - <province> - <postal code> - <country>``.
    Empty fields after the type are replaced by the placeholder.
    """
    placeholder = placeholder if placeholder is not None else settings.not_available_label
    fields = (
        address.city_or_town,
        address.province_or_state.name,
        address.postal_code,
        address.country.name,
    )
    parts = [format_line_detail(address.line_detail, placeholder)]
    parts.extend(str_or(value, placeholder) for value in fields)
    return f"{address.address_type.name}: " + " - ".join(parts)


def format_error_list(errors: Sequence[str]) -> str:
    """Render messages as a bracketed, double-quoted list: ``["a", "b"]``."""
    return json.dumps(list(errors), ensure_ascii=False)


def format_validation_failure(address_id: str, errors: Sequence[str]) -> str:
    return (
        f"Address for ID: {address_id} is invalid. "
        f"Validation errors: {format_error_list(errors)}"
    )


def write_lines(lines: Iterable[str], stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in lines:
        print(line, file=out)
