from __future__ import annotations

from pathlib import Path

import typer

from brewtap.cli.commands._helpers import exit_on_error
from brewtap.cli.context import build_context
from brewtap.core.config import ConfigOverrides, resolve_config
from brewtap.output.console import Style
from brewtap.release.service import FormulaService


def update(
    tag: str | None = typer.Option(
        None, "--tag", help="Release tag (default: $CODEX_RELEASE_TAG or $GITHUB_REF_NAME)"
    ),
    owner: str | None = typer.Option(None, "--owner", help="Release repository owner"),
    repo: str | None = typer.Option(None, "--repo", help="Release repository name"),
    tap: Path | None = typer.Option(
        None, "--tap", help="Homebrew tap checkout (default: $TAP_REPO or ../homebrew-tap)"
    ),
    formula_path: Path | None = typer.Option(
        None, "--formula-path", help="Output file (default: <tap>/Formula/codex.rb)"
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Per-download timeout in seconds (default: 60)"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the rendered formula instead of writing it"
    ),
) -> None:
    """Download release archives and regenerate the Homebrew formula."""
    ctx = build_context()

    config = exit_on_error(
        resolve_config(
            ctx.env,
            overrides=ConfigOverrides(
                owner=owner,
                repo=repo,
                release_tag=tag,
                tap_dir=tap,
                formula_path=formula_path,
                timeout=timeout,
            ),
        ),
        ctx.console,
    )
    ctx.console.print(f"release: {config.slug}@{config.release_tag}", Style.DIM)

    service = FormulaService(http=ctx.http, console=ctx.console)
    exit_on_error(service.update(config, dry_run=dry_run), ctx.console)
