"""Selector part kinds, ranked in the order they must appear in a chain."""

from __future__ import annotations

from enum import IntEnum


class PartKind(IntEnum):
    """Category of a selector part.

    The integer value is the part's rank. A chain accepts parts in
    non-decreasing rank order:

        element#id.class[attr]:pseudo-class::pseudo-element

    ``NONE`` is the rank of an empty chain and never renders.
    """

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def unique(self) -> bool:
        """True if the kind may occur at most once per chain."""
        return self in _UNIQUE

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        """Return the fragment for *value* with this kind's markers."""
        if self is PartKind.NONE:
            raise ValueError("PartKind.NONE has no rendering")
        return _TEMPLATES[self].format(value=value)


_UNIQUE = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

_TEMPLATES: dict[PartKind, str] = {
    PartKind.ELEMENT: "{value}",
    PartKind.ID: "#{value}",
    PartKind.CLASS: ".{value}",
    PartKind.ATTRIBUTE: "[{value}]",
    PartKind.PSEUDO_CLASS: ":{value}",
    PartKind.PSEUDO_ELEMENT: "::{value}",
}
