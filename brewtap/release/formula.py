"""Homebrew formula rendering and output."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from brewtap.core.result import Err, Ok, Result
from brewtap.release.errors import FormulaError
from brewtap.release.targets import TargetPlatform, asset_url

__all__ = ["FormulaInputs", "render_formula", "write_formula", "LICENSE"]

LICENSE = "Apache-2.0"


@dataclass(frozen=True, slots=True)
class FormulaInputs:
    owner: str
    repo: str
    version: str
    release_tag: str
    digests: Mapping[TargetPlatform, str]

    def url(self, target: TargetPlatform) -> str:
        return asset_url(self.owner, self.repo, self.release_tag, target)


def render_formula(inputs: FormulaInputs) -> str:
    """Render the Codex formula.

    Pure string construction. ``inputs.digests`` must hold all four targets;
    a missing one raises KeyError.
    """
    mac_arm = TargetPlatform.MACOS_ARM64
    mac_intel = TargetPlatform.MACOS_X86_64
    linux_arm = TargetPlatform.LINUX_ARM64
    linux_intel = TargetPlatform.LINUX_X86_64
    d = inputs.digests

    return f"""class Codex < Formula
  desc "Codex CLI"
  homepage "https://github.com/{inputs.owner}/{inputs.repo}"
  version "{inputs.version}"
  license "{LICENSE}"

  on_macos do
    on_arm do
      url "{inputs.url(mac_arm)}"
      sha256 "{d[mac_arm]}"
    end

    on_intel do
      url "{inputs.url(mac_intel)}"
      sha256 "{d[mac_intel]}"
    end
  end

  on_linux do
    on_arm do
      url "{inputs.url(linux_arm)}"
      sha256 "{d[linux_arm]}"
    end

    on_intel do
      url "{inputs.url(linux_intel)}"
      sha256 "{d[linux_intel]}"
    end
  end

  def install
    target = if OS.mac?
      Hardware::CPU.arm? ? "{mac_arm.value}" : "{mac_intel.value}"
    else
      Hardware::CPU.arm? ? "{linux_arm.value}" : "{linux_intel.value}"
    end
    bin.install "codex-#{{target}}" => "codex"
  end

  test do
    system "#{{bin}}/codex", "--version"
  end
end
"""


def write_formula(path: Path, text: str) -> Result[Path, FormulaError]:
    """Write ``text`` to ``path``, creating parents and replacing any old file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        return Err(
            FormulaError(
                kind="write_failed",
                message=f"failed to write formula to {path}",
                hint=str(e),
            )
        )
    return Ok(path)
