"""Formula release pipeline: tag validation, digests, rendering."""

from brewtap.release.errors import FormulaError
from brewtap.release.service import FormulaService, UpdateResult
from brewtap.release.tag import ReleaseVersion, parse_release_tag
from brewtap.release.targets import ALL_TARGETS, TargetPlatform

__all__ = [
    "ALL_TARGETS",
    "FormulaError",
    "FormulaService",
    "ReleaseVersion",
    "TargetPlatform",
    "UpdateResult",
    "parse_release_tag",
]
