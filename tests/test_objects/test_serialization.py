"""Tests for serialize/deserialize."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass

import pytest

from csschain.objects import Rectangle, deserialize, serialize


@dataclass
class Circle:
    radius: float


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-standard JSON constant {name}")


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self._cache = None


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_list(self) -> None:
        assert serialize([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_key_order(self) -> None:
        assert serialize({"height": 10, "width": 20}) == '{"height":10,"width":20}'

    def test_scalars(self) -> None:
        assert serialize("a") == '"a"'
        assert serialize(None) == "null"
        assert serialize(True) == "true"

    def test_non_ascii_kept(self) -> None:
        assert serialize({"name": "café"}) == '{"name":"café"}'

    def test_dataclass(self) -> None:
        assert serialize(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_public_attributes(self) -> None:
        assert serialize(Point(1, 2)) == '{"x":1,"y":2}'

    def test_indent(self) -> None:
        assert serialize({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_unserializable(self) -> None:
        with pytest.raises(TypeError):
            serialize({1, 2})

    def test_non_finite_floats_become_null(self) -> None:
        text = serialize({"w": math.nan, "h": math.inf, "d": [-math.inf, 1.5]})
        assert text == '{"w":null,"h":null,"d":[null,1.5]}'
        assert json.loads(text, parse_constant=_reject_constant) == {
            "w": None,
            "h": None,
            "d": [None, 1.5],
        }

    def test_non_finite_dataclass_field(self) -> None:
        assert serialize(Rectangle(math.nan, 2)) == '{"width":null,"height":2}'


# ---------------------------------------------------------------------------
# deserialize
# ---------------------------------------------------------------------------


class TestDeserialize:
    def test_round_trip(self) -> None:
        r = deserialize(Rectangle, serialize({"width": 10, "height": 20}))
        assert r == Rectangle(10, 20)
        assert r.get_area() == 200

    def test_positional_not_by_name(self) -> None:
        r = deserialize(Rectangle, serialize({"height": 10, "width": 20}))
        assert r.width == 10
        assert r.height == 20

    def test_instance_as_target(self) -> None:
        c = deserialize(Circle(1), '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10

    def test_array_payload(self) -> None:
        assert deserialize(Point, "[3, 4]").x == 3

    def test_round_trip_dataclass(self) -> None:
        original = Rectangle(3, 7)
        assert deserialize(Rectangle, serialize(original)) == original

    def test_malformed_json(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            deserialize(Rectangle, "{width: 1")

    def test_arity_mismatch(self) -> None:
        with pytest.raises(TypeError):
            deserialize(Circle, '{"a": 1, "b": 2}')

    def test_scalar_payload(self) -> None:
        with pytest.raises(TypeError, match="Cannot build Circle"):
            deserialize(Circle, "10")
