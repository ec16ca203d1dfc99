"""csschain -- CSS selector chain builder plus small object helpers."""

__version__ = "1.0.0"

from csschain.objects import Rectangle, deserialize, serialize  # noqa: E402
from csschain.selector import (  # noqa: E402
    DuplicatePartError,
    OrderViolationError,
    PartKind,
    SelectorChain,
    SelectorError,
)

__all__ = [
    "__version__",
    "Rectangle",
    "serialize",
    "deserialize",
    "PartKind",
    "SelectorChain",
    "SelectorError",
    "DuplicatePartError",
    "OrderViolationError",
]
