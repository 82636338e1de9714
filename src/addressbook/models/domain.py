"""Domain models for address records."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, TextIO

from ..services.outputs.formatter import (
    format_address,
    format_line_detail,
    format_validation_failure,
    write_lines,
)
from ..services.validation.rules import (
    COUNTRY_REQUIRED_MESSAGE,
    LINE_DETAIL_REQUIRED_MESSAGE,
    POSTAL_CODE_INVALID_MESSAGE,
    PROVINCE_REQUIRED_MESSAGE,
    is_valid_postal_code,
    province_required,
)


@dataclass(frozen=True, slots=True)
class CodeAndName:
    """A code/name classification such as an address type, country or province."""

    code: str = ""
    name: str = ""

    def is_valid_country(self) -> bool:
        return bool(self.name)


AddressType = CodeAndName
Country = CodeAndName
ProvinceOrState = CodeAndName


@dataclass(frozen=True, slots=True)
class LineDetail:
    """Free-text street lines of an address."""

    line1: str = ""
    line2: str = ""

    def is_valid_line_detail(self) -> bool:
        """At least one of the two lines must be filled in."""
        return bool(self.line1) or bool(self.line2)

    def display(self) -> str:
        return format_line_detail(self)

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Address:
    """A postal address record.

    Field constraints are not enforced on construction; call :meth:`validate`
    or :meth:`is_valid` to check them.
    """

    id: str
    address_type: AddressType
    city_or_town: str
    postal_code: str
    last_updated: str
    line_detail: LineDetail = field(default_factory=LineDetail)
    province_or_state: ProvinceOrState = field(default_factory=ProvinceOrState)
    country: Country = field(default_factory=Country)
    suburb_or_district: str = ""

    def has_valid_province(self) -> bool:
        if province_required(self.country.code):
            return bool(self.province_or_state.name)
        return True

    def validate(self) -> list[str]:
        """Return a message for every failed check, in check order."""
        errors: list[str] = []
        if not self.has_valid_province():
            errors.append(PROVINCE_REQUIRED_MESSAGE)
        if not self.country.is_valid_country():
            errors.append(COUNTRY_REQUIRED_MESSAGE)
        if not self.line_detail.is_valid_line_detail():
            errors.append(LINE_DETAIL_REQUIRED_MESSAGE)
        if not is_valid_postal_code(self.postal_code):
            errors.append(POSTAL_CODE_INVALID_MESSAGE)
        return errors

    def is_valid(self) -> bool:
        return (
            self.has_valid_province()
            and self.country.is_valid_country()
            and self.line_detail.is_valid_line_detail()
            and is_valid_postal_code(self.postal_code)
        )

    def display(self) -> str:
        return format_address(self)

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class AddressCollection:
    """Ordered, read-only set of addresses loaded from one document."""

    addresses: tuple[Address, ...] = ()

    @classmethod
    def from_json_file(cls, path: Path | str) -> "AddressCollection":
        from ..data.addresses_repository import load_addresses

        return load_addresses(path)

    def __len__(self) -> int:
        return len(self.addresses)

    def __iter__(self) -> Iterator[Address]:
        return iter(self.addresses)

    def __getitem__(self, index: int) -> Address:
        return self.addresses[index]

    def get(self, address_id: str) -> Optional[Address]:
        for address in self.addresses:
            if address.id == address_id:
                return address
        return None

    def invalid_addresses(self) -> list[Address]:
        return [address for address in self.addresses if not address.is_valid()]

    def validate_all(self) -> list[str]:
        """Return one report line per invalid address, in document order."""
        report: list[str] = []
        for address in self.addresses:
            errors = address.validate()
            if errors:
                report.append(format_validation_failure(address.id, errors))
        return report

    def print_all(self, stream: Optional[TextIO] = None) -> None:
        write_lines((address.display() for address in self.addresses), stream)
