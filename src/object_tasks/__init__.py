"""object_tasks: rectangle value object, JSON bridge, and CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from object_tasks.config import DEFAULT_JSON_CONFIG, JSONConfig
from object_tasks.errors import (
    DuplicateFragmentError,
    FragmentOrderError,
    MalformedJSONError,
    ObjectTasksError,
    SelectorError,
)
from object_tasks.json_bridge import from_json, parse_record, rebind, to_json
from object_tasks.rectangle import Rectangle
from object_tasks.selector import (
    Combinator,
    CombinedSelector,
    FragmentKind,
    Selector,
    SelectorBuilder,
    css_selector_builder,
)

__all__ = [
    "__version__",
    # rectangle
    "Rectangle",
    # json
    "to_json",
    "from_json",
    "parse_record",
    "rebind",
    "JSONConfig",
    "DEFAULT_JSON_CONFIG",
    # selector
    "Selector",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
    "Combinator",
    "FragmentKind",
    # errors
    "ObjectTasksError",
    "MalformedJSONError",
    "SelectorError",
    "DuplicateFragmentError",
    "FragmentOrderError",
]
