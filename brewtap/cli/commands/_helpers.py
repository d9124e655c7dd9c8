"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from brewtap.core.config import ConfigError
from brewtap.core.result import Err, Result
from brewtap.output.errors import error_exit_code, print_error
from brewtap.release.errors import FormulaError

if TYPE_CHECKING:
    from brewtap.output.console import ConsoleProtocol


def exit_on_error[T](
    result: Result[T, ConfigError] | Result[T, FormulaError],
    console: ConsoleProtocol,
) -> T:
    """Return the Ok value, or print the error and exit non-zero.

    Replaces the common pattern:
        match result:
            case Err(e):
                print_error(e, console)
                raise typer.Exit(code=error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_error(result.error, console)
        raise typer.Exit(code=error_exit_code(result.error))
    return result.value
