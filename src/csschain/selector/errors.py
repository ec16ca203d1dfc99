"""Errors raised when a selector chain rejects a part."""

from __future__ import annotations

from csschain.selector.model import PartKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for rejected selector parts.

    Attributes:
        kind: The kind of the part that was rejected.
        current: The kind the chain was at when the part was offered.
    """

    def __init__(self, message: str, *, kind: PartKind, current: PartKind) -> None:
        super().__init__(message)
        self.kind = kind
        self.current = current


class DuplicatePartError(SelectorError):
    """An element, id or pseudo-element was supplied twice on one chain."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind=kind, current=kind)


class OrderViolationError(SelectorError):
    """A part was appended after a part of a higher rank."""

    def __init__(self, kind: PartKind, current: PartKind) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind, current=current)
