from __future__ import annotations

import os
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from ..errors import HttpErrorsError

console = Console()

DEBUG_ENV = "HTTPERRORS_DEBUG"

CommandParams = ParamSpec("CommandParams")
CommandReturn = TypeVar("CommandReturn")


def handle_cli_errors(
    func: Callable[CommandParams, CommandReturn],
) -> Callable[CommandParams, CommandReturn]:
    @wraps(func)
    def wrapper(*args: CommandParams.args, **kwargs: CommandParams.kwargs) -> CommandReturn:
        try:
            return func(*args, **kwargs)
        except typer.BadParameter:
            raise
        except typer.Exit:
            raise
        except HttpErrorsError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise typer.Exit(1) from None
        except Exception as exc:
            if os.getenv(DEBUG_ENV):
                raise
            console.print(f"[red]Error:[/red] Unexpected failure: {escape(str(exc))}")
            console.print(f"Set {DEBUG_ENV}=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


__all__ = ["DEBUG_ENV", "console", "handle_cli_errors"]
