"""Rectangle value object."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rectangle:
    """A width/height pair with a derived area.

    Values are stored as given; no range or type checks are applied.
    """

    width: Any
    height: Any

    def get_area(self) -> Any:
        """Return ``height * width``, recomputed on every call."""
        return self.height * self.width

    @property
    def area(self) -> Any:
        """Same as :meth:`get_area`."""
        return self.get_area()
