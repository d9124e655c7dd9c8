"""Release configuration resolved from the environment.

The configuration is built exactly once at startup and handed to every step
explicitly; nothing below the CLI reads ``os.environ`` on its own.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .result import Err, Ok, Result

__all__ = [
    "ConfigError",
    "ConfigOverrides",
    "ReleaseConfig",
    "resolve_config",
    "resolve_token",
    "DEFAULT_OWNER",
    "DEFAULT_REPO",
    "DEFAULT_TAP_DIR",
    "DEFAULT_TIMEOUT",
    "TOKEN_ENV_VARS",
]

DEFAULT_OWNER = "mazdak"
DEFAULT_REPO = "codex"
DEFAULT_TAP_DIR = "../homebrew-tap"
DEFAULT_TIMEOUT = 60.0

# Checked in order; the first non-empty value wins.
TOKEN_ENV_VARS: tuple[str, ...] = ("GH_TOKEN", "GITHUB_TOKEN")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the release configuration cannot be resolved."""

    kind: Literal["missing_tag", "tap_missing", "invalid_config"]
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Immutable settings for one formula update run.

    Attributes:
        owner: GitHub owner of the release repository
        repo: GitHub repository name
        release_tag: Tag whose assets are published (e.g. ``rust-v0.98.0``)
        tap_dir: Local checkout of the Homebrew tap
        formula_path: Destination of the rendered formula
        token: Optional bearer token for release asset downloads
        timeout: Per-download timeout in seconds
    """

    owner: str
    repo: str
    release_tag: str
    tap_dir: Path
    formula_path: Path
    token: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class ConfigOverrides:
    """Values given on the command line; they win over the environment."""

    owner: str | None = None
    repo: str | None = None
    release_tag: str | None = None
    tap_dir: Path | None = None
    formula_path: Path | None = None
    timeout: float | None = None


def _env(env: Mapping[str, str], name: str) -> str | None:
    value = env.get(name, "").strip()
    return value or None


def _default_slug(env: Mapping[str, str]) -> tuple[str, str]:
    combined = _env(env, "GITHUB_REPOSITORY")
    if combined and "/" in combined:
        owner, _, repo = combined.partition("/")
        # owner is the first segment, repo the last.
        return owner, repo.rsplit("/", 1)[-1]
    return DEFAULT_OWNER, DEFAULT_REPO


def resolve_token(env: Mapping[str, str]) -> str | None:
    """Return the first bearer token found in ``TOKEN_ENV_VARS``, if any."""
    for name in TOKEN_ENV_VARS:
        token = _env(env, name)
        if token:
            return token
    return None


def _resolve_timeout(
    env: Mapping[str, str], override: float | None
) -> Result[float, ConfigError]:
    if override is not None:
        timeout = override
    else:
        raw = _env(env, "BREWTAP_TIMEOUT")
        if raw is None:
            return Ok(DEFAULT_TIMEOUT)
        try:
            timeout = float(raw)
        except ValueError:
            return Err(
                ConfigError(
                    kind="invalid_config",
                    message=f"BREWTAP_TIMEOUT must be a number of seconds, got '{raw}'",
                )
            )
    if timeout <= 0:
        return Err(
            ConfigError(
                kind="invalid_config",
                message=f"timeout must be positive, got {timeout}",
            )
        )
    return Ok(timeout)


def resolve_config(
    env: Mapping[str, str],
    *,
    overrides: ConfigOverrides | None = None,
) -> Result[ReleaseConfig, ConfigError]:
    """Build the release configuration from ``env`` and CLI ``overrides``.

    Only reads ``env`` and checks that the tap directory exists.

    Args:
        env: Environment mapping (normally ``os.environ``)
        overrides: Command line values taking precedence over ``env``

    Returns:
        Ok with ReleaseConfig, or Err with ConfigError
    """
    o = overrides or ConfigOverrides()
    default_owner, default_repo = _default_slug(env)

    owner = o.owner or _env(env, "GITHUB_OWNER") or default_owner
    repo = o.repo or _env(env, "GITHUB_REPO") or default_repo

    # Not stripped: a padded tag must fail validation, not be silently fixed.
    tag_candidates = (o.release_tag, env.get("CODEX_RELEASE_TAG"), env.get("GITHUB_REF_NAME"))
    release_tag = next((t for t in tag_candidates if t and t.strip()), None)
    if not release_tag:
        return Err(
            ConfigError(
                kind="missing_tag",
                message="CODEX_RELEASE_TAG is required (e.g. rust-v0.98.0)",
                hint="set CODEX_RELEASE_TAG or pass --tag",
            )
        )

    timeout = _resolve_timeout(env, o.timeout)
    if isinstance(timeout, Err):
        return timeout

    tap_dir = o.tap_dir or Path(_env(env, "TAP_REPO") or DEFAULT_TAP_DIR)
    formula_path = o.formula_path
    if formula_path is None:
        formula_env = _env(env, "FORMULA_PATH")
        formula_path = Path(formula_env) if formula_env else tap_dir / "Formula" / "codex.rb"

    if not tap_dir.is_dir():
        return Err(
            ConfigError(
                kind="tap_missing",
                message=f"homebrew-tap repository not found at {tap_dir}",
                hint="clone the tap next to this repository or set TAP_REPO",
            )
        )

    return Ok(
        ReleaseConfig(
            owner=owner,
            repo=repo,
            release_tag=release_tag,
            tap_dir=tap_dir,
            formula_path=formula_path,
            token=resolve_token(env),
            timeout=timeout.value,
        )
    )
