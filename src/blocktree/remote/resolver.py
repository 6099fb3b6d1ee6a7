"""Resolve reusable block references over a REST API.

:class:`RestReferenceResolver` satisfies the
:class:`~blocktree.collaborators.ReferenceResolver` protocol, so it can be
passed straight to ``ConverterConfig(reference_resolver=...)``.

Lookup lifecycle:

1. ``GET {base_url}/blocks/{ref}`` (``context=edit`` when a token is set).
2. On ``2xx`` -- return ``content.raw``, else ``content.rendered``, else a
   plain string ``content``.
3. On ``404`` / ``410`` -- return ``None``; the converter skips the block.
4. On ``429`` / ``5xx`` / network error -- back off and retry.
5. On other ``4xx`` -- raise :class:`BlockTreeRemoteError`.
6. Out of attempts -- raise :class:`BlockTreeRetryExhaustedError` or
   :class:`BlockTreeNetworkError`.
"""

from __future__ import annotations

import time
from typing import Any

import httpx

from blocktree.errors import (
    BlockTreeNetworkError,
    BlockTreeRemoteError,
    BlockTreeRetryExhaustedError,
)
from blocktree.observability import fields, get_logger, resolve_metrics

from .config import RemoteConfig
from .retries import RETRYABLE_STATUSES, compute_backoff, should_retry

log = get_logger("blocktree.remote")

_MISSING_STATUSES = frozenset({404, 410})


def _parse_retry_after(response: httpx.Response) -> float | None:
    """Extract the ``Retry-After`` header value as a float, or ``None``."""
    raw = response.headers.get("retry-after")
    if raw is None:
        return None
    try:
        return float(raw)
    except (ValueError, TypeError):
        return None


def extract_content(body: Any) -> str | None:
    """Pull the block markup out of a reusable-block response body."""
    if not isinstance(body, dict):
        return None
    content = body.get("content")
    if isinstance(content, str):
        return content
    if isinstance(content, dict):
        for key in ("raw", "rendered"):
            value = content.get(key)
            if isinstance(value, str) and value:
                return value
    return None


class RestReferenceResolver:
    """Fetch the content behind reusable block references.

    Parameters
    ----------
    config:
        Endpoint, auth and retry settings.
    client:
        Optional pre-built :class:`httpx.Client`, e.g. one using
        ``httpx.MockTransport`` in tests.  Its ``base_url`` is ignored;
        request URLs are absolute.
    """

    def __init__(
        self,
        config: RemoteConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config if config is not None else RemoteConfig()
        self._metrics = resolve_metrics(self._config.metrics)
        self._cache: dict[str, str | None] = {}

        headers = {"Accept": "application/json"}
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"

        if client is None:
            client = httpx.Client(
                headers=headers,
                timeout=httpx.Timeout(self._config.timeout_seconds),
                follow_redirects=True,
            )
        else:
            client.headers.update(headers)
        self._client = client

    # -- public API --------------------------------------------------------

    def __call__(self, ref: Any) -> str | None:
        return self.resolve(ref)

    def resolve(self, ref: Any) -> str | None:
        """Return the content for *ref*, or ``None`` when it does not exist.

        Raises
        ------
        BlockTreeRemoteError
            On non-retryable client errors other than 404/410.
        BlockTreeRetryExhaustedError
            When every attempt got a retryable status.
        BlockTreeNetworkError
            When the last attempt failed at the transport level.
        """
        key = str(ref)
        if self._config.cache and key in self._cache:
            return self._cache[key]

        content = self._fetch(key)
        if self._config.cache:
            self._cache[key] = content
        return content

    def clear_cache(self) -> None:
        self._cache.clear()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RestReferenceResolver:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # -- internals ---------------------------------------------------------

    def _fetch(self, ref: str) -> str | None:
        config = self._config
        url = f"{config.base_url}/blocks/{ref}"
        params = {"context": "edit"} if config.token else None
        last_status: int | None = None

        for attempt in range(config.retry_max_attempts):
            try:
                response = self._client.get(url, params=params)
            except httpx.HTTPError as exc:
                self._metrics.increment(
                    "blocktree.remote_requests_total",
                    tags={"status": "error"},
                )
                log.warning(
                    "reference lookup network error",
                    extra=fields(op="resolve", ref=ref, attempt=attempt + 1, error=str(exc)),
                )
                if not should_retry(None, exc, attempt, config.retry_max_attempts):
                    raise BlockTreeNetworkError(
                        message=f"Network error fetching reusable block {ref}: {exc}",
                        context={"url": url, "attempt": attempt + 1},
                        cause=exc,
                    ) from exc
                self._sleep(attempt, None)
                continue

            status = response.status_code
            last_status = status
            self._metrics.increment(
                "blocktree.remote_requests_total",
                tags={"status": str(status)},
            )

            if response.is_success:
                return extract_content(self._json(response))

            if status in _MISSING_STATUSES:
                log.debug(
                    "reference not found",
                    extra=fields(op="resolve", ref=ref, status=status),
                )
                return None

            if should_retry(status, None, attempt, config.retry_max_attempts):
                self._sleep(attempt, _parse_retry_after(response))
                continue

            if status in RETRYABLE_STATUSES:
                break

            if 400 <= status < 500:
                body = self._json(response)
                raise BlockTreeRemoteError(
                    message=f"Lookup of reusable block {ref} failed with status {status}.",
                    context={"status_code": status, "ref": ref, "body": body},
                )
            break

        raise BlockTreeRetryExhaustedError(
            message=f"Gave up fetching reusable block {ref} after {config.retry_max_attempts} attempts.",
            context={
                "attempts": config.retry_max_attempts,
                "last_status": last_status,
                "ref": ref,
            },
        )

    def _sleep(self, attempt: int, retry_after: float | None) -> None:
        delay = compute_backoff(
            attempt,
            base=self._config.retry_base_delay,
            maximum=self._config.retry_max_delay,
            jitter=self._config.retry_jitter,
            retry_after=retry_after,
        )
        self._metrics.increment("blocktree.remote_retries_total")
        time.sleep(delay)

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text[:500]
