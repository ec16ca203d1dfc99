"""CLI command: csschain selector -- build a selector from kind=value parts."""

from __future__ import annotations

import sys

import click

from csschain.selector import SelectorChain, SelectorError, build, combine

# Bare tokens that join the chain built so far to the next one.
COMBINATORS = {"+": "+", "~": "~", ">": ">", "descendant": " "}


def _split_segments(
    tokens: tuple[str, ...],
) -> tuple[list[list[tuple[str, str]]], list[str]]:
    segments: list[list[tuple[str, str]]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if token in COMBINATORS:
            if not segments[-1]:
                raise click.UsageError(f"Combinator {token!r} has no selector before it")
            combinators.append(COMBINATORS[token])
            segments.append([])
            continue
        name, sep, value = token.partition("=")
        if not sep:
            raise click.UsageError(f"Expected kind=value, got {token!r}")
        segments[-1].append((name, value))
    if not segments[-1]:
        raise click.UsageError("Selector ends with a combinator")
    return segments, combinators


@click.command()
@click.argument("parts", nargs=-1, required=True)
def selector(parts: tuple[str, ...]) -> None:
    """Build and print a CSS selector.

    Each PART is kind=value, where kind is one of: element, id, class,
    attr, pseudo-class, pseudo-element. A bare +, ~ or > (or the word
    "descendant") combines what came before with what follows.

    Example: csschain selector element=div id=main + element=a
    """
    segments, combinators = _split_segments(parts)

    try:
        chain: SelectorChain = build(segments[0])
        for combinator, segment in zip(combinators, segments[1:]):
            chain = combine(chain, combinator, build(segment))
    except (SelectorError, ValueError) as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(chain.stringify())
