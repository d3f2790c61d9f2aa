"""Helpers for the open-data JSON encodings.

The exports encode the same field in several ways depending on the
generation of the file: strings may be scalars or `{"#text": ...}`
objects, relations may be a single object or a list, and entities may
be wrapped in a composite `export.<plural>.<singular>` list or stored one
per file with the entity as root.
"""

from collections.abc import Callable, Iterable
from datetime import date
from typing import Any, TypeVar

import pydantic
from loguru import logger

T = TypeVar("T")

# shapes a decoder does not expect surface as one of these
DECODE_ERRORS = (AttributeError, TypeError, KeyError, ValueError, pydantic.ValidationError)


def text(value: Any) -> str | None:
    """Unwrap a scalar or `{"#text": ...}` value to a trimmed string (None when empty)."""
    if isinstance(value, dict):
        value = value.get("#text")
    if value is None or isinstance(value, (dict, list)):
        return None
    result = str(value).strip()
    return result or None


def as_list(value: Any) -> list:
    """Normalize a scalar-or-array relation to a list (empty when absent)."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def dig(doc: Any, *path: str) -> Any:
    """Walk nested dicts, returning None as soon as a level is missing."""
    for key in path:
        if not isinstance(doc, dict):
            return None
        doc = doc.get(key)
    return doc


def to_int(value: Any) -> int:
    """Parse a count that may be a string, an int, or absent."""
    try:
        return int(text(value) or 0)
    except ValueError:
        return 0


def unwrap_entities(doc: Any, plural: str, singular: str) -> list[dict]:
    """Entities of one kind found in a parsed document, whatever the export shape.

    Handles `export.<plural>.<singular>` (composite export),
    `<plural>.<singular>` (single-file archives), `{<singular>: ...}`
    (one file per entity) and a root that is itself the entity.
    """
    if not isinstance(doc, dict):
        return []
    for container in (dig(doc, "export", plural), doc.get(plural)):
        if isinstance(container, dict) and singular in container:
            return [e for e in as_list(container[singular]) if isinstance(e, dict)]
    if singular in doc:
        return [e for e in as_list(doc[singular]) if isinstance(e, dict)]
    if "uid" in doc:
        return [doc]
    return []


def to_date(value: Any) -> date | None:
    """ISO date or datetime string (possibly with a `+hh:mm` offset) to a date."""
    raw = text(value)
    if not raw:
        return None
    try:
        return date.fromisoformat(raw.split("T")[0].split("+")[0][:10])
    except ValueError:
        return None


def decode_each(raws: Iterable[dict], decode: Callable[[dict], T | None], kind: str) -> list[T]:
    """Decode every raw entity, skipping (and logging) the ones whose shape breaks the decoder."""
    decoded = []
    for raw in raws:
        try:
            record = decode(raw)
        except DECODE_ERRORS as e:
            uid = text(raw.get("uid")) if isinstance(raw, dict) else None
            logger.warning("Skipping malformed {} {}: {!r}", kind, uid or "<no uid>", e)
            continue
        if record is not None:
            decoded.append(record)
    return decoded
