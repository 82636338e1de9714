"""Exceptions raised while loading address documents."""

from __future__ import annotations


class AddressLoadError(Exception):
    """Base class for failures while loading an address document."""


class AddressFileReadError(AddressLoadError):
    """The address file is missing or could not be read."""


class AddressDeserializationError(AddressLoadError):
    """The address file is not valid JSON or does not match the record shape."""
