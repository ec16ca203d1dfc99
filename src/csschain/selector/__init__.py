"""Selector chain builder -- public re-exports."""

from csschain.selector.builder import (
    PARTS,
    attr,
    build,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from csschain.selector.chain import SelectorChain
from csschain.selector.errors import (
    DuplicatePartError,
    OrderViolationError,
    SelectorError,
)
from csschain.selector.model import PartKind

__all__ = [
    # model
    "PartKind",
    "SelectorChain",
    # errors
    "SelectorError",
    "DuplicatePartError",
    "OrderViolationError",
    # facade
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
