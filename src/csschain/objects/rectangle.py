"""Rectangle record with an on-demand area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        # Recomputed on every call so later edits to width/height show up.
        return self.width * self.height
