"""Exit codes for the brewtap CLI.

Only "zero vs non-zero" is part of the contract with CI; the distinct
non-zero values make logs easier to triage.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    - 0: Success
    - 1: Validation error (malformed release tag)
    - 2: Environment error (missing tag, missing tap checkout, bad settings)
    - 4: Network error (release asset download failed or was empty)
    - 5: I/O error (formula could not be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
    IO_ERROR = 5
