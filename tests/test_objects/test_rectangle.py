"""Tests for the Rectangle record."""

from csschain.objects import Rectangle


class TestRectangle:
    def test_fields(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self) -> None:
        assert Rectangle(10, 20).get_area() == 200

    def test_area_follows_mutation(self) -> None:
        r = Rectangle(10, 20)
        r.width = 5
        assert r.get_area() == 100
        r.height = 2
        assert r.get_area() == 10

    def test_float_sides(self) -> None:
        assert Rectangle(1.5, 2).get_area() == 3.0
