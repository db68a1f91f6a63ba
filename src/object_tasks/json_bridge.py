"""JSON bridge: encode values to text and rebind parsed text to a template type.

Decoding is split in two steps so the unchecked part is explicit:

    record = parse_record('{"radius": 10}')   # plain dict
    circle = rebind(Circle, record)           # Circle, __init__ not called

``from_json`` composes both.  Field names are never checked against what the
template's methods expect; a missing field shows up as ``AttributeError`` when
a method reads it.
"""
from __future__ import annotations

import dataclasses
import json
import logging
import math
from typing import Any

from object_tasks.config import DEFAULT_JSON_CONFIG, JSONConfig
from object_tasks.errors import MalformedJSONError

__all__ = ["to_json", "from_json", "parse_record", "rebind"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _encode_object(obj: Any) -> Any:
    """Fallback encoder for objects ``json`` does not know natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _null_non_finite(value: Any) -> Any:
    """Replace NaN and infinities with ``None`` throughout *value*."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _null_non_finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_null_non_finite(item) for item in value]
    return value


def _encode_object_finite(obj: Any) -> Any:
    return _null_non_finite(_encode_object(obj))


def to_json(value: Any, config: JSONConfig | None = None) -> str:
    """Return the JSON text for *value*.

    NaN and infinities are written as ``null``; with
    ``JSONConfig(nan_as_null=False)`` they raise ``ValueError`` instead.

    >>> to_json([1, 2, 3])
    '[1,2,3]'
    >>> to_json({"width": 10, "height": 20})
    '{"width":10,"height":20}'
    """
    cfg = config or DEFAULT_JSON_CONFIG
    if cfg.nan_as_null:
        value = _null_non_finite(value)
        default = _encode_object_finite
    else:
        default = _encode_object
    return json.dumps(
        value,
        default=default,
        separators=cfg.separators,
        ensure_ascii=cfg.ensure_ascii,
        sort_keys=cfg.sort_keys,
        allow_nan=False,
    )


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def parse_record(text: str) -> Any:
    """Parse *text* into plain dicts, lists and scalars."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedJSONError(
            f"Invalid JSON: {exc.msg}", exc.lineno, exc.colno, cause=exc
        ) from exc


def _assign_fields(obj: Any, record: dict[str, Any]) -> None:
    """Store *record* on *obj*, bypassing any ``__setattr__`` override."""
    if hasattr(obj, "__dict__"):
        obj.__dict__.update(record)
        return
    for key, value in record.items():
        try:
            object.__setattr__(obj, key, value)
        except AttributeError:
            logger.debug(
                "Dropped field %r: %s has no slot for it", key, type(obj).__name__
            )


def rebind(template: Any, record: Any) -> Any:
    """Treat *record* as an instance of *template* without validating it.

    *template* is a class or an instance whose class is used.  When the class
    subclasses the parsed type (``class Tags(list)``) the value is wrapped as
    ``cls(record)``.  Otherwise a dict becomes an instance built via
    ``__new__`` whose attributes are the dict's items, and any other value is
    returned as it is.

    Classes whose ``__new__`` needs arguments (namedtuples) are built as
    ``cls(**record)``; if that does not fit the record, the plain dict is
    returned.
    """
    cls = template if isinstance(template, type) else type(template)
    if record is not None and issubclass(cls, type(record)):
        return cls(record)
    if not isinstance(record, dict):
        return record

    try:
        obj = cls.__new__(cls)
    except TypeError:
        try:
            return cls(**record)
        except TypeError:
            logger.debug(
                "Could not build %s from fields %s", cls.__name__, list(record)
            )
            return record
    # slotted classes have no __dict__; frozen ones reject plain setattr
    _assign_fields(obj, record)
    logger.debug("Rebound %d field(s) to %s", len(record), cls.__name__)
    return obj


def from_json(template: Any, text: str) -> Any:
    """Parse *text* and rebind the result to *template*'s type."""
    return rebind(template, parse_record(text))
