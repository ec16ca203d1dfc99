"""CLI command: csschain rectangle -- print a rectangle's area or JSON."""

from __future__ import annotations

import click

from csschain.config import Settings
from csschain.objects import Rectangle, serialize


def _number(value: float) -> float | int:
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def rectangle(settings: Settings | None, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(_number(width), _number(height))
    if as_json:
        indent = settings.json_indent if settings else None
        click.echo(serialize(rect, indent=indent))
        return
    click.echo(_number(float(rect.get_area())))
