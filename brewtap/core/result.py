"""Result type for explicit error handling.

Every fallible step of the formula pipeline returns a ``Result`` instead of
raising. Only the CLI layer turns an ``Err`` into a process exit code.

Usage:
    match parse_release_tag("rust-v1.2.3"):
        case Ok(version):
            print(version.version)
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
