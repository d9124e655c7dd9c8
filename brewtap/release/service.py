"""Formula update pipeline: validate, fetch, render, write."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from brewtap.core.result import Err, Ok, Result
from brewtap.output.console import ConsoleProtocol, Style
from brewtap.release.digest import ArtifactDigests, collect_digests
from brewtap.release.errors import FormulaError
from brewtap.release.formula import FormulaInputs, render_formula, write_formula
from brewtap.release.tag import ReleaseVersion, parse_release_tag
from brewtap.release.targets import ALL_TARGETS, TargetPlatform

if TYPE_CHECKING:
    from brewtap.core.config import ReleaseConfig
    from brewtap.tools.http import HttpClient


@dataclass(frozen=True, slots=True)
class UpdateResult:
    version: ReleaseVersion
    digests: ArtifactDigests
    formula: str
    written_to: Path | None


class FormulaService:
    """Validate -> fetch x4 -> render -> write, stopping at the first error."""

    def __init__(
        self,
        *,
        http: HttpClient,
        console: ConsoleProtocol,
        tmp_root: Path | None = None,
    ) -> None:
        self._http = http
        self._console = console
        self._tmp_root = tmp_root

    def update(
        self, config: ReleaseConfig, *, dry_run: bool = False
    ) -> Result[UpdateResult, FormulaError]:
        version = parse_release_tag(config.release_tag)
        if isinstance(version, Err):
            return version

        if config.token is None:
            self._console.print("no GH_TOKEN/GITHUB_TOKEN set; downloading anonymously", Style.DIM)

        digests = collect_digests(
            self._http,
            config,
            ALL_TARGETS,
            tmp_root=self._tmp_root,
            on_digest=self._report_digest,
        )
        if isinstance(digests, Err):
            return digests

        formula = render_formula(
            FormulaInputs(
                owner=config.owner,
                repo=config.repo,
                version=version.value.version,
                release_tag=config.release_tag,
                digests=digests.value,
            )
        )

        if dry_run:
            self._console.raw(formula)
            return Ok(UpdateResult(version.value, digests.value, formula, None))

        written = write_formula(config.formula_path, formula)
        if isinstance(written, Err):
            return written

        self._console.success(f"Updated Homebrew formula at {written.value}")
        return Ok(UpdateResult(version.value, digests.value, formula, written.value))

    def _report_digest(self, target: TargetPlatform, digest: str) -> None:
        self._console.print(f"{target.label}: {digest[:16]}...", Style.DIM)
