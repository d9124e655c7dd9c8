"""Network helpers used by the release pipeline."""

from brewtap.tools.http import (
    HttpClient,
    HttpError,
    MockHttpClient,
    RealHttpClient,
    bearer_headers,
)

__all__ = [
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "bearer_headers",
]
