"""HTTP client abstraction for release asset downloads.

This module provides:
- HttpClient: Protocol for downloads (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import http.client
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from brewtap import __version__
from brewtap.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
    "bearer_headers",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


def bearer_headers(token: str | None) -> dict[str, str]:
    """Authorization header for ``token``, or no headers at all."""
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP downloads.

    Lets tests inject a mock client instead of reaching the network.
    """

    def download(
        self,
        url: str,
        dest: Path,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> Result[Path, HttpError]:
        """Download URL to file.

        Args:
            url: URL to download
            dest: Destination path (overwritten)
            headers: Extra request headers (e.g. Authorization)
            timeout: Per-request timeout in seconds; client default if None

        Returns:
            Ok with dest path, or Err with HttpError
        """
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Follows redirects (GitHub serves release assets from a CDN), uses the
    system certificates and bounds every request with a timeout.
    """

    def __init__(
        self, timeout: float = 60.0, user_agent: str = f"brewtap/{__version__}"
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def download(
        self,
        url: str,
        dest: Path,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> Result[Path, HttpError]:
        """Download URL to file; a truncated body is an error, not a short file.

        On any error the partially written ``dest`` is removed.
        """
        result = self._download(url, dest, headers=headers, timeout=timeout)
        if isinstance(result, Err):
            dest.unlink(missing_ok=True)
        return result

    def _download(
        self,
        url: str,
        dest: Path,
        *,
        headers: Mapping[str, str] | None,
        timeout: float | None,
    ) -> Result[Path, HttpError]:
        request_headers = {"User-Agent": self.user_agent}
        if headers:
            request_headers.update(headers)

        try:
            req = urllib.request.Request(url, headers=request_headers)
            with urllib.request.urlopen(
                req,
                timeout=timeout if timeout is not None else self.timeout,
                context=self._ssl_context,
            ) as response:
                expected = _content_length(response.headers.get("Content-Length"))
                received = 0

                dest.parent.mkdir(parents=True, exist_ok=True)
                with open(dest, "wb") as f:
                    while True:
                        chunk = response.read(64 * 1024)
                        if not chunk:
                            break
                        f.write(chunk)
                        received += len(chunk)

                # http.client returns b"" instead of raising when a
                # Content-Length body is cut short.
                if expected is not None and received < expected:
                    return Err(
                        HttpError(
                            url=url,
                            status=0,
                            message=f"Transfer closed with {expected - received} bytes remaining",
                        )
                    )
                return Ok(dest)

        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except http.client.IncompleteRead as e:
            return Err(
                HttpError(url=url, status=0, message=f"Incomplete read ({len(e.partial)} bytes)")
            )
        except http.client.HTTPException as e:
            return Err(HttpError(url=url, status=0, message=f"{type(e).__name__}: {e}"))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Download timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))


def _content_length(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        length = int(value)
    except ValueError:
        return None
    return length if length >= 0 else None


@dataclass(frozen=True, slots=True)
class RecordedCall:
    """A download request seen by MockHttpClient."""

    url: str
    dest: Path
    headers: dict[str, str]
    timeout: float | None


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_download("https://example.com/a.tar.gz", b"bytes")
        result = client.download("https://example.com/a.tar.gz", dest)
    """

    def __init__(self) -> None:
        self._download_responses: dict[str, bytes | HttpError] = {}
        self.calls: list[RecordedCall] = []

    def set_download(self, url: str, response: bytes | HttpError) -> None:
        """Set download content (or failure) for URL."""
        self._download_responses[url] = response

    @property
    def urls(self) -> list[str]:
        return [c.url for c in self.calls]

    def download(
        self,
        url: str,
        dest: Path,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> Result[Path, HttpError]:
        """Mock download - writes predefined content to dest."""
        self.calls.append(
            RecordedCall(url=url, dest=dest, headers=dict(headers or {}), timeout=timeout)
        )

        if url not in self._download_responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._download_responses[url]
        if isinstance(response, HttpError):
            return Err(response)

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(response)
        return Ok(dest)
