"""JSON text helpers: compact serialization and positional deserialization."""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from typing import Any, TypeVar

__all__ = ["serialize", "deserialize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with None, which encodes as null."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def _encode_default(obj: Any) -> Any:
    """Fallback encoder for values the json module cannot handle natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _finite(dataclasses.asdict(obj))
    if hasattr(obj, "__dict__"):
        return _finite({k: v for k, v in vars(obj).items() if not k.startswith("_")})
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any, *, indent: int | None = None) -> str:
    """Return the JSON text for *value*.

    Output is compact (no spaces after ``,`` or ``:``) unless *indent* is
    given. Keys keep their insertion order and non-ASCII text is written
    as-is. Dataclass instances encode as their fields; other objects as
    their public attributes. NaN and infinities encode as ``null``.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        _finite(value),
        separators=separators,
        indent=indent,
        ensure_ascii=False,
        allow_nan=False,
        default=_encode_default,
    )


def deserialize(target: type[T] | T, text: str) -> T:
    """Build an instance of *target* from JSON *text*.

    *target* is a class or an instance of one. The parsed values are passed
    to the class positionally: an object's values in key order, an array's
    items in order. The JSON key order must therefore match the
    constructor's parameter order; keys are not matched by name.

    Raises:
        json.JSONDecodeError: *text* is not valid JSON.
        TypeError: the payload is neither an object nor an array, or the
            constructor rejects the arguments.
    """
    cls = target if isinstance(target, type) else type(target)
    payload = json.loads(text)
    if isinstance(payload, dict):
        args = list(payload.values())
    elif isinstance(payload, list):
        args = payload
    else:
        raise TypeError(
            f"Cannot build {cls.__name__} from a JSON {type(payload).__name__}"
        )
    logger.debug("Constructing %s from %d positional value(s)", cls.__name__, len(args))
    return cls(*args)
