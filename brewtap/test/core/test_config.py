from __future__ import annotations

from pathlib import Path

import pytest

from brewtap.core.config import (
    DEFAULT_OWNER,
    DEFAULT_REPO,
    DEFAULT_TIMEOUT,
    ConfigOverrides,
    resolve_config,
    resolve_token,
)
from brewtap.core.result import Err, Ok


def _env(tap: Path, **extra: str) -> dict[str, str]:
    env = {"TAP_REPO": str(tap), "CODEX_RELEASE_TAG": "rust-v1.2.3"}
    env.update(extra)
    return env


def test_defaults_when_no_repository_env(tmp_path: Path) -> None:
    result = resolve_config(_env(tmp_path))

    assert isinstance(result, Ok)
    cfg = result.value
    assert cfg.owner == DEFAULT_OWNER
    assert cfg.repo == DEFAULT_REPO
    assert cfg.release_tag == "rust-v1.2.3"
    assert cfg.tap_dir == tmp_path
    assert cfg.formula_path == tmp_path / "Formula" / "codex.rb"
    assert cfg.token is None
    assert cfg.timeout == DEFAULT_TIMEOUT


def test_owner_and_repo_from_github_repository(tmp_path: Path) -> None:
    result = resolve_config(_env(tmp_path, GITHUB_REPOSITORY="acme/tool"))

    assert isinstance(result, Ok)
    assert result.value.slug == "acme/tool"


def test_github_repository_without_slash_is_ignored(tmp_path: Path) -> None:
    result = resolve_config(_env(tmp_path, GITHUB_REPOSITORY="acme"))

    assert isinstance(result, Ok)
    assert result.value.slug == f"{DEFAULT_OWNER}/{DEFAULT_REPO}"


def test_explicit_owner_repo_override_combined(tmp_path: Path) -> None:
    env = _env(tmp_path, GITHUB_REPOSITORY="acme/tool", GITHUB_OWNER="me", GITHUB_REPO="fork")
    result = resolve_config(env)

    assert isinstance(result, Ok)
    assert result.value.slug == "me/fork"


def test_tag_falls_back_to_ref_name(tmp_path: Path) -> None:
    env = {"TAP_REPO": str(tmp_path), "GITHUB_REF_NAME": "rust-v0.98.0"}
    result = resolve_config(env)

    assert isinstance(result, Ok)
    assert result.value.release_tag == "rust-v0.98.0"


def test_release_tag_var_wins_over_ref_name(tmp_path: Path) -> None:
    result = resolve_config(_env(tmp_path, GITHUB_REF_NAME="main"))

    assert isinstance(result, Ok)
    assert result.value.release_tag == "rust-v1.2.3"


def test_missing_tag_is_error(tmp_path: Path) -> None:
    result = resolve_config({"TAP_REPO": str(tmp_path), "CODEX_RELEASE_TAG": ""})

    assert isinstance(result, Err)
    assert result.error.kind == "missing_tag"
    assert "CODEX_RELEASE_TAG is required" in result.error.message


def test_missing_tap_dir_is_error(tmp_path: Path) -> None:
    missing = tmp_path / "nope"
    result = resolve_config(_env(missing))

    assert isinstance(result, Err)
    assert result.error.kind == "tap_missing"
    assert str(missing) in result.error.message


def test_tap_dir_must_be_directory(tmp_path: Path) -> None:
    not_dir = tmp_path / "file"
    not_dir.write_text("", encoding="utf-8")

    result = resolve_config(_env(not_dir))

    assert isinstance(result, Err)
    assert result.error.kind == "tap_missing"


def test_formula_path_env_override(tmp_path: Path) -> None:
    out = tmp_path / "elsewhere" / "codex.rb"
    result = resolve_config(_env(tmp_path, FORMULA_PATH=str(out)))

    assert isinstance(result, Ok)
    assert result.value.formula_path == out


def test_cli_overrides_win(tmp_path: Path) -> None:
    other_tap = tmp_path / "tap2"
    other_tap.mkdir()
    overrides = ConfigOverrides(
        owner="o",
        repo="r",
        release_tag="rust-v9.9.9",
        tap_dir=other_tap,
        timeout=5.0,
    )

    result = resolve_config(_env(tmp_path, GITHUB_OWNER="x"), overrides=overrides)

    assert isinstance(result, Ok)
    cfg = result.value
    assert cfg.slug == "o/r"
    assert cfg.release_tag == "rust-v9.9.9"
    assert cfg.formula_path == other_tap / "Formula" / "codex.rb"
    assert cfg.timeout == 5.0


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ({}, None),
        ({"GITHUB_TOKEN": "gh"}, "gh"),
        ({"GH_TOKEN": "first", "GITHUB_TOKEN": "second"}, "first"),
        ({"GH_TOKEN": "", "GITHUB_TOKEN": "second"}, "second"),
    ],
)
def test_resolve_token_priority(env: dict[str, str], expected: str | None) -> None:
    assert resolve_token(env) == expected


def test_timeout_from_env(tmp_path: Path) -> None:
    result = resolve_config(_env(tmp_path, BREWTAP_TIMEOUT="12.5"))

    assert isinstance(result, Ok)
    assert result.value.timeout == 12.5


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_invalid_timeout_is_error(tmp_path: Path, raw: str) -> None:
    result = resolve_config(_env(tmp_path, BREWTAP_TIMEOUT=raw))

    assert isinstance(result, Err)
    assert result.error.kind == "invalid_config"


def test_config_is_frozen(tmp_path: Path) -> None:
    result = resolve_config(_env(tmp_path))
    assert isinstance(result, Ok)

    with pytest.raises(AttributeError):
        result.value.owner = "other"  # type: ignore[misc]


def test_tag_is_kept_verbatim(tmp_path: Path) -> None:
    result = resolve_config(_env(tmp_path, CODEX_RELEASE_TAG=" rust-v1.2.3"))

    assert isinstance(result, Ok)
    assert result.value.release_tag == " rust-v1.2.3"


def test_blank_tag_falls_back_to_ref_name(tmp_path: Path) -> None:
    result = resolve_config(_env(tmp_path, CODEX_RELEASE_TAG="  ", GITHUB_REF_NAME="rust-v0.1.0"))

    assert isinstance(result, Ok)
    assert result.value.release_tag == "rust-v0.1.0"
