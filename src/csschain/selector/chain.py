"""SelectorChain: a fluent, order-checked accumulator of selector fragments."""

from __future__ import annotations

import logging

from csschain.selector.errors import DuplicatePartError, OrderViolationError
from csschain.selector.model import PartKind

__all__ = ["SelectorChain"]

logger = logging.getLogger(__name__)


class SelectorChain:
    """Mutable builder for one CSS selector string.

    Every part method appends a fragment and returns the same chain, so calls
    can be chained::

        SelectorChain().element("a").attr('href$=".png"').pseudo_class("focus")

    ``stringify()`` consumes the chain: it returns the rendered selector and
    leaves the chain empty.
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._kind = PartKind.NONE

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    @property
    def kind(self) -> PartKind:
        """Rank of the last part appended (``NONE`` for an empty chain)."""
        return self._kind

    def add(self, kind: PartKind, value: str) -> SelectorChain:
        """Append *value* as a part of *kind*.

        Raises:
            DuplicatePartError: *kind* is unique and was the last part added.
            OrderViolationError: a part of a higher rank was already added.
        """
        if kind is PartKind.NONE:
            raise ValueError("Cannot add a part of kind NONE")
        if kind.unique and self._kind is kind:
            logger.debug("Rejected duplicate %s part %r", kind.label, value)
            raise DuplicatePartError(kind)
        if self._kind > kind:
            logger.debug(
                "Rejected %s part %r after %s", kind.label, value, self._kind.label
            )
            raise OrderViolationError(kind, self._kind)

        self._fragments.append(kind.render(value))
        self._kind = kind
        return self

    def element(self, value: str) -> SelectorChain:
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorChain:
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> SelectorChain:
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorChain:
        return self.add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorChain:
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorChain:
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    def combine(
        self, left: SelectorChain, combinator: str, right: SelectorChain
    ) -> SelectorChain:
        """Replace this chain's fragments with ``left <combinator> right``.

        Each side is taken as already valid; no ordering check spans the
        combinator. *left* and *right* are left untouched.

        The rank is not changed, so a part added afterwards is checked against
        whatever this chain held before and lands after *right*.
        """
        self._fragments = [*left._fragments, f" {combinator} ", *right._fragments]
        return self

    def stringify(self) -> str:
        """Render the selector and reset the chain to empty."""
        selector = "".join(self._fragments)
        self._fragments = []
        self._kind = PartKind.NONE
        logger.debug("Rendered selector %r", selector)
        return selector

    render = stringify

    def __repr__(self) -> str:
        return f"SelectorChain({''.join(self._fragments)!r})"
