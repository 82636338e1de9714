"""Data access helpers for loading address documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..config import settings
from ..errors import AddressDeserializationError, AddressFileReadError
from ..models.domain import AddressCollection
from ..schemas.addresses import AddressDocument

logger = logging.getLogger(__name__)


def load_addresses(source: Optional[Path | str] = None) -> AddressCollection:
    """Load addresses from ``source`` or the configured address file.

    The file is read on every call.
    """

    json_path = Path(source) if source is not None else settings.address_file
    logger.debug("Reading address file %s", json_path)
    try:
        data = json_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Unable to read address file %s: %s", json_path, exc)
        raise AddressFileReadError(f"error importing json file: {exc!r}") from exc

    try:
        records = AddressDocument.validate_json(data)
    except ValidationError as exc:
        logger.error("Address file %s failed to deserialize: %s", json_path, exc)
        raise AddressDeserializationError(f"error deserializing json string: {exc}") from exc

    collection = AddressCollection(addresses=tuple(record.to_domain() for record in records))
    logger.info("Loaded %d addresses from %s", len(collection), json_path)
    return collection
