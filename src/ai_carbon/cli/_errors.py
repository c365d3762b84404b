"""CLI error handling and decorators."""

from __future__ import annotations

import functools
from typing import Any, Callable

import typer

from ai_carbon.errors import CarbonError


def handle_error(msg: str) -> None:
    """Print an error message and exit."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


def carbon_errors(f: Callable) -> Callable:
    """Decorator that turns CarbonError into a clean CLI error + exit 1."""

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except CarbonError as e:
            handle_error(str(e))

    return wrapper
