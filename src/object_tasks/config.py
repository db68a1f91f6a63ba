"""Settings for the JSON bridge."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JSONConfig:
    """Formatting options passed through to ``json.dumps``."""

    separators: tuple[str, str] = (",", ":")  # compact, no whitespace
    ensure_ascii: bool = False
    sort_keys: bool = False
    nan_as_null: bool = True  # False: NaN/Infinity raise ValueError


DEFAULT_JSON_CONFIG = JSONConfig()
