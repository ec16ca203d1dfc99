"""Stateless entry points that start a new SelectorChain.

Example:
    >>> from csschain.selector import builder as css
    >>> css.combine(css.element("div").id("main"), "+", css.element("a")).stringify()
    'div#main + a'
"""

from __future__ import annotations

from collections.abc import Iterable

from csschain.selector.chain import SelectorChain
from csschain.selector.model import PartKind

__all__ = [
    "PARTS",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "build",
]

# Names accepted by build(), keyed the way CSS writes them.
PARTS: dict[str, PartKind] = {
    "element": PartKind.ELEMENT,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}


def element(value: str) -> SelectorChain:
    return SelectorChain().element(value)


def id(value: str) -> SelectorChain:  # noqa: A001
    return SelectorChain().id(value)


def class_(value: str) -> SelectorChain:
    return SelectorChain().class_(value)


def attr(value: str) -> SelectorChain:
    return SelectorChain().attr(value)


def pseudo_class(value: str) -> SelectorChain:
    return SelectorChain().pseudo_class(value)


def pseudo_element(value: str) -> SelectorChain:
    return SelectorChain().pseudo_element(value)


def combine(left: SelectorChain, combinator: str, right: SelectorChain) -> SelectorChain:
    """Join two chains with *combinator* (``" "``, ``"+"``, ``"~"``, ``">"``)."""
    return SelectorChain().combine(left, combinator, right)


def build(parts: Iterable[tuple[str, str]]) -> SelectorChain:
    """Fold ``(name, value)`` pairs into one chain, in order.

    Names are the keys of ``PARTS``. Raises ValueError for an unknown name;
    ordering errors come from the chain itself.
    """
    chain = SelectorChain()
    for name, value in parts:
        kind = PARTS.get(name)
        if kind is None:
            raise ValueError(f"Unknown selector part: {name!r}")
        chain.add(kind, value)
    return chain
