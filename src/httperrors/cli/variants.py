"""Commands for inspecting the registered error variants."""

from __future__ import annotations

from typing import Any

import typer
from rich.markup import escape
from rich.table import Table

from ..deprecation import RecordingReporter
from ..factory import ErrorFactory, create_error
from ..registry import default_registry
from .common import console, handle_cli_errors

_CLASS_FILTERS = {"4xx": 400, "400": 400, "5xx": 500, "500": 500}
_SHAPE_FIELDS = ("message", "name", "status", "status_code", "expose")


def register(app: typer.Typer) -> None:
    app.command("list")(list_variants)
    app.command("show")(show_variant)
    app.command("check")(check_status)


def _parse_key(raw: str) -> int | str:
    return int(raw) if raw.isdigit() else raw


def _parse_props(values: list[str] | None) -> dict[str, str]:
    props: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        props[key] = value
    return props


@handle_cli_errors
def list_variants(
    code_class: str | None = typer.Option(
        None,
        "--class",
        help="Only show one status class (4xx or 5xx)",
    ),
) -> None:
    """List every registered HTTP error variant."""

    bucket: int | None = None
    if code_class is not None:
        bucket = _CLASS_FILTERS.get(code_class.lower())
        if bucket is None:
            raise typer.BadParameter("--class must be 4xx or 5xx")

    table = Table(title="HTTP error variants")
    table.add_column("Code", no_wrap=True)
    table.add_column("Class", no_wrap=True)
    table.add_column("Expose", no_wrap=True)
    table.add_column("Reason")
    for variant in default_registry.variants():
        descriptor = default_registry.descriptor(variant.status)
        if bucket is not None and descriptor.code_class != bucket:
            continue
        table.add_row(
            str(descriptor.status),
            descriptor.class_name,
            "yes" if descriptor.expose else "no",
            descriptor.phrase,
        )
    console.print(table)


@handle_cli_errors
def show_variant(
    key: str = typer.Argument(..., help="Status code or identifier, e.g. 404 or NotFound"),
    message: str | None = typer.Option(None, "--message", "-m", help="Custom error message"),
    prop: list[str] | None = typer.Option(
        None,
        "--prop",
        "-p",
        help="Extra property KEY=VALUE to copy onto the error (repeatable)",
    ),
) -> None:
    """Build an error for a registered variant and print its shape."""

    variant = default_registry[_parse_key(key)]
    args: list[Any] = [variant.status]
    if message is not None:
        args.append(message)
    props = _parse_props(prop)
    if props:
        args.append(props)
    err = create_error(*args)

    console.print(f"[bold]{type(err).__name__}[/bold]")
    for field in _SHAPE_FIELDS:
        console.print(f"  {field}: {escape(repr(getattr(err, field, None)))}")
    extras = {name: value for name, value in vars(err).items() if name not in _SHAPE_FIELDS}
    for name, value in sorted(extras.items()):
        console.print(f"  {escape(name)}: {escape(repr(value))}")


@handle_cli_errors
def check_status(
    status: int = typer.Argument(..., help="Numeric status code to resolve"),
) -> None:
    """Report how a status code would be resolved by create_error."""

    recorder = RecordingReporter()
    err = ErrorFactory(deprecate=recorder)(status)
    resolved = getattr(err, "status", None)
    if resolved == status:
        console.print(f"[green]{status} resolves to {type(err).__name__}[/green]")
    else:
        console.print(f"[yellow]{status} falls back to {resolved}[/yellow]")
    for signal in recorder.messages:
        console.print(f"[yellow]Deprecated:[/yellow] {escape(signal)}")


__all__ = ["check_status", "list_variants", "register", "show_variant"]
