"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent CI logs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from brewtap.core.config import ConfigError
from brewtap.core.errors import ErrorCode
from brewtap.output.console import Style
from brewtap.release.errors import FormulaError

if TYPE_CHECKING:
    from brewtap.output.console import ConsoleProtocol

__all__ = ["print_error", "error_exit_code"]


def print_error(error: ConfigError | FormulaError, console: ConsoleProtocol) -> None:
    """Print a one-line diagnostic, plus a dim hint when there is one."""
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def error_exit_code(error: ConfigError | FormulaError) -> int:
    match error:
        case ConfigError(kind="missing_tag" | "tap_missing" | "invalid_config"):
            return int(ErrorCode.ENV_ERROR)
        case FormulaError(kind="invalid_tag"):
            return int(ErrorCode.USER_ERROR)
        case FormulaError(kind="download_failed" | "empty_download"):
            return int(ErrorCode.NETWORK_ERROR)
        case FormulaError(kind="write_failed"):
            return int(ErrorCode.IO_ERROR)
    return int(ErrorCode.USER_ERROR)
