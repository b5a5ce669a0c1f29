#!/usr/bin/env -S uv run

# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "quantalogic-scopefn",
#     "typer",
#     "loguru"
# ]
# ///

import asyncio
from dataclasses import dataclass

import typer
from loguru import logger

from quantalogic_scopefn import (
    ScopeFunction,
    ValueScopeFunction,
    aalso_ref,
    scoped,
    take_if_copy,
    take_if_ref,
    with_copy,
)

app = typer.Typer()


@dataclass
class Frame(ValueScopeFunction):
    x: int = 0
    width: int = 0


class Label(ScopeFunction):
    def __init__(self) -> None:
        self.text = ""
        self.visible = False


@app.command()
def values(width: int = typer.Option(100, "--width", "-w", help="Width applied to the copied frame")):
    """Show that value-semantics helpers never touch the original."""
    origin = Frame()
    frame = origin.also(lambda f: setattr(f, "width", width))
    logger.debug(f"origin={origin} frame={frame}")
    typer.echo(f"original frame: {origin}")
    typer.echo(f"configured copy: {frame}")
    typer.echo(f"with_copy(5, +1) -> {with_copy(5, lambda x: x + 1)}")

    def grow(items):
        items.append(4)
        return len(items) == 4

    typer.echo(f"take_if_copy([1, 2, 3]) -> {take_if_copy([1, 2, 3], grow)}")


@app.command()
def references(text: str = typer.Argument("hello", help="Text assigned to the shared label")):
    """Show that reference-semantics helpers mutate the live instance."""
    label = Label().also(lambda l: setattr(l, "text", text))
    typer.echo(f"label.text = {label.text!r}")

    def show_then_reject(l):
        l.visible = True
        return False

    rejected = take_if_ref(label, show_then_reject)
    logger.info(f"take_if_ref rejected={rejected is None}, visible={label.visible}")
    typer.echo(typer.style(f"rejected: {rejected is None}, label.visible: {label.visible}", fg=typer.colors.YELLOW))
    typer.echo(f"scoped(label).let -> {scoped(label).let(lambda l: l.text.upper())}")


@app.command()
def awaitable(delay: float = typer.Option(0.0, "--delay", help="Seconds the async block sleeps")):
    """Run a coroutine block through an async scope function."""

    async def publish(l):
        await asyncio.sleep(delay)
        l.visible = True

    label = asyncio.run(aalso_ref(Label(), publish))
    typer.echo(typer.style(f"published: {label.visible}", fg=typer.colors.GREEN, bold=True))


if __name__ == "__main__":
    app()
