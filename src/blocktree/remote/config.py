"""Configuration for fetching reusable content over HTTP."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

_LOCAL_HOSTS = ("localhost", "127.0.0.1", "::1")


@dataclass
class RemoteConfig:
    """Settings for :class:`RestReferenceResolver`.

    Parameters
    ----------
    base_url:
        REST API root, e.g. ``"https://example.com/wp-json/wp/v2"``.
        Reusable content is read from ``{base_url}/blocks/{ref}``.
    token:
        Optional bearer token.  Never logged.
    timeout_seconds:
        HTTP request timeout in seconds.
    retry_max_attempts:
        Total attempts per lookup, including the first request.
    retry_base_delay:
        Base delay (seconds) for exponential backoff.
    retry_max_delay:
        Upper cap (seconds) on computed backoff delay.
    retry_jitter:
        Randomise backoff delays.
    cache:
        Remember resolved content per reference id for the lifetime of
        the resolver.
    metrics:
        Optional :class:`~blocktree.observability.MetricsHook` backend.
    """

    base_url: str = "http://localhost/wp-json/wp/v2"

    token: str = ""

    timeout_seconds: float = 10.0

    retry_max_attempts: int = 3

    retry_base_delay: float = 0.5

    retry_max_delay: float = 10.0

    retry_jitter: bool = True

    cache: bool = True

    metrics: Any | None = None

    def __post_init__(self) -> None:
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if parsed.scheme == "http" and parsed.hostname not in _LOCAL_HOSTS:
            raise ValueError(
                f"base_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS, or target localhost for testing."
            )
        self.base_url = self.base_url.rstrip("/")

        if self.retry_max_attempts < 1:
            raise ValueError(f"retry_max_attempts must be >= 1, got {self.retry_max_attempts}")
        if self.retry_base_delay < 0:
            raise ValueError(f"retry_base_delay must be >= 0, got {self.retry_base_delay}")
        if self.retry_max_delay < 0:
            raise ValueError(f"retry_max_delay must be >= 0, got {self.retry_max_delay}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")

    def __repr__(self) -> str:
        """Mask the token to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "token":
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"RemoteConfig({', '.join(parts)})"
