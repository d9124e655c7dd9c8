"""Error types for the formula release pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FormulaErrorKind = Literal[
    "invalid_tag",
    "download_failed",
    "empty_download",
    "write_failed",
]


@dataclass(frozen=True, slots=True)
class FormulaError:
    """Canonical error payload for tag validation, downloads and output.

    Rendered by the CLI as a single ``error:`` line plus an optional hint.
    """

    kind: FormulaErrorKind
    message: str
    hint: str | None = None
