"""Metrics hook protocol and no-op default implementation.

blocktree reports counters and timings while converting content and while
fetching referenced content over HTTP.  Without a configured backend a
:class:`NoopMetricsHook` discards everything.

Emitted metric names:

* ``blocktree.blocks_converted_total``     -- counter, tagged by ``kind``
* ``blocktree.html_merges_total``          -- counter
* ``blocktree.references_expanded_total``  -- counter
* ``blocktree.references_missing_total``   -- counter
* ``blocktree.conversion_duration_ms``     -- timing
* ``blocktree.remote_requests_total``      -- counter, tagged by ``status``
* ``blocktree.remote_retries_total``       -- counter
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    *tags* is an optional ``str -> str`` mapping that backends translate
    into their own labelling scheme.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics backend that silently discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass


def resolve_metrics(metrics: Any | None) -> MetricsHook:
    """Return *metrics*, or a :class:`NoopMetricsHook` when it is ``None``."""
    return metrics if metrics is not None else NoopMetricsHook()
