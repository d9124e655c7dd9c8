"""Release archive targets published for Homebrew."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "TargetPlatform",
    "ALL_TARGETS",
    "RELEASE_HOST",
    "asset_name",
    "asset_url",
]

RELEASE_HOST = "https://github.com"


class TargetPlatform(Enum):
    """Rust target triples with a published ``codex-<target>.tar.gz`` archive."""

    MACOS_ARM64 = "aarch64-apple-darwin"
    MACOS_X86_64 = "x86_64-apple-darwin"
    LINUX_ARM64 = "aarch64-unknown-linux-musl"
    LINUX_X86_64 = "x86_64-unknown-linux-musl"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human label used in progress and error messages."""
        return _LABELS[self]


_LABELS: dict[TargetPlatform, str] = {
    TargetPlatform.MACOS_ARM64: "macOS arm64",
    TargetPlatform.MACOS_X86_64: "macOS x86_64",
    TargetPlatform.LINUX_ARM64: "Linux arm64",
    TargetPlatform.LINUX_X86_64: "Linux x86_64",
}

# Fetch order.
ALL_TARGETS: tuple[TargetPlatform, ...] = (
    TargetPlatform.MACOS_ARM64,
    TargetPlatform.MACOS_X86_64,
    TargetPlatform.LINUX_ARM64,
    TargetPlatform.LINUX_X86_64,
)


def asset_name(target: TargetPlatform) -> str:
    return f"codex-{target.value}.tar.gz"


def asset_url(owner: str, repo: str, tag: str, target: TargetPlatform) -> str:
    return f"{RELEASE_HOST}/{owner}/{repo}/releases/download/{tag}/{asset_name(target)}"
