from object_tasks.selector.builder import (
    CombinedSelector,
    Selector,
    SelectorBuilder,
    css_selector_builder,
)
from object_tasks.selector.model import Combinator, FragmentKind

__all__ = [
    "Selector",
    "CombinedSelector",
    "SelectorBuilder",
    "css_selector_builder",
    "Combinator",
    "FragmentKind",
]
