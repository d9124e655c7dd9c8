"""Download release archives and compute their SHA-256 digests.

Each archive lives in its own temporary directory for the duration of one
fetch; the directory is removed on every exit path.
"""

from __future__ import annotations

import hashlib
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from brewtap.core.result import Err, Ok, Result
from brewtap.release.errors import FormulaError
from brewtap.release.targets import ALL_TARGETS, TargetPlatform, asset_name, asset_url
from brewtap.tools.http import bearer_headers

if TYPE_CHECKING:
    from brewtap.core.config import ReleaseConfig
    from brewtap.tools.http import HttpClient

__all__ = [
    "ArtifactDigests",
    "collect_digests",
    "fetch_digest",
    "sha256_file",
]

ArtifactDigests = dict[TargetPlatform, str]


def sha256_file(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as f:
        while True:
            chunk = f.read(1024 * 1024)
            if not chunk:
                break
            digest.update(chunk)
    return digest.hexdigest()


def fetch_digest(
    http: HttpClient,
    config: ReleaseConfig,
    target: TargetPlatform,
    *,
    tmp_root: Path | None = None,
) -> Result[str, FormulaError]:
    """Download the archive for ``target`` and return its SHA-256 hex digest.

    Args:
        http: HTTP client used for the download
        config: Release configuration (owner, repo, tag, token, timeout)
        target: Platform whose archive is fetched
        tmp_root: Parent for the scratch directory (system default if None)

    Returns:
        Ok with the lowercase hex digest, or Err when the transfer fails or
        the downloaded file is empty
    """
    url = asset_url(config.owner, config.repo, config.release_tag, target)

    with tempfile.TemporaryDirectory(prefix="brewtap-", dir=tmp_root) as scratch:
        dest = Path(scratch) / asset_name(target)
        result = http.download(
            url,
            dest,
            headers=bearer_headers(config.token),
            timeout=config.timeout,
        )
        if isinstance(result, Err):
            return Err(
                FormulaError(
                    kind="download_failed",
                    message=f"failed to download {target.label} asset for {config.release_tag}",
                    hint=str(result.error),
                )
            )

        if not dest.is_file() or dest.stat().st_size == 0:
            return Err(
                FormulaError(
                    kind="empty_download",
                    message=f"failed to download {target.label} asset for {config.release_tag}",
                    hint=f"empty response from {url}",
                )
            )

        return Ok(sha256_file(dest))


def collect_digests(
    http: HttpClient,
    config: ReleaseConfig,
    targets: Iterable[TargetPlatform] = ALL_TARGETS,
    *,
    tmp_root: Path | None = None,
    on_digest: Callable[[TargetPlatform, str], None] | None = None,
) -> Result[ArtifactDigests, FormulaError]:
    """Fetch every target in order; stop at the first failure.

    On failure the digests gathered so far are dropped with the local map and
    never returned.
    """
    digests: ArtifactDigests = {}
    for target in targets:
        result = fetch_digest(http, config, target, tmp_root=tmp_root)
        if isinstance(result, Err):
            return result
        digests[target] = result.value
        if on_digest:
            on_digest(target, result.value)
    return Ok(digests)
