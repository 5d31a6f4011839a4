from __future__ import annotations

import logging

import typer

from . import variants

app = typer.Typer(help="Inspect HTTP error variants")

variants.register(app)


@app.callback()
def common(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Initialize shared Typer context state."""

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


__all__ = ["app", "variants"]
