"""Release tag validation and version derivation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from brewtap.core.result import Err, Ok, Result
from brewtap.release.errors import FormulaError


TAG_PREFIX = "rust-v"

_TAG_RE = re.compile(r"^rust-v([0-9]+)\.([0-9]+)\.([0-9]+)(?:-(alpha|beta)(?:\.([0-9]+))?)?$")

Channel = Literal["alpha", "beta"]


@dataclass(frozen=True, slots=True)
class ReleaseVersion:
    """Version derived from a ``rust-v`` release tag.

    ``version`` is the tag with the prefix removed, verbatim; it is what the
    formula's ``version`` field carries.
    """

    tag: str
    version: str
    major: int
    minor: int
    patch: int
    channel: Channel | None = None
    prerelease_number: int | None = None

    @property
    def is_prerelease(self) -> bool:
        return self.channel is not None


def parse_release_tag(tag: str) -> Result[ReleaseVersion, FormulaError]:
    m = _TAG_RE.fullmatch(tag)
    if m is None:
        return Err(
            FormulaError(
                kind="invalid_tag",
                message=f"release tag '{tag}' doesn't match expected format",
                hint="expected rust-v<major>.<minor>.<patch>[-alpha|-beta[.N]]",
            )
        )

    channel: Channel | None = None
    if m.group(4) == "alpha":
        channel = "alpha"
    elif m.group(4) == "beta":
        channel = "beta"

    number = m.group(5)
    return Ok(
        ReleaseVersion(
            tag=tag,
            version=tag[len(TAG_PREFIX) :],
            major=int(m.group(1)),
            minor=int(m.group(2)),
            patch=int(m.group(3)),
            channel=channel,
            prerelease_number=int(number) if number is not None else None,
        )
    )
