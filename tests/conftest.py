"""Shared test fixtures for the blocktree test suite."""

from __future__ import annotations

from typing import Any

import pytest

from blocktree.config import ConverterConfig
from blocktree.converter.block_converter import BlockConverter


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})

    def count(self, name: str) -> int:
        return sum(entry["value"] for entry in self.increments if entry["name"] == name)


@pytest.fixture
def config() -> ConverterConfig:
    """Default converter configuration (identity collaborators)."""
    return ConverterConfig()


@pytest.fixture
def converter(config: ConverterConfig) -> BlockConverter:
    """Block converter using the default test config."""
    return BlockConverter(config)


@pytest.fixture
def recording_metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()
