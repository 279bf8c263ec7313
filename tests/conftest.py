"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from zabbix_reporter.adapters.memory_registry import InMemoryMetricRegistry
from zabbix_reporter.adapters.recording_sender import RecordingSender
from zabbix_reporter.config.models import ReporterConfig
from zabbix_reporter.domain.entities import (
    Counter,
    Gauge,
    Histogram,
    Meter,
    Snapshot,
    Timer,
    TimeUnit,
)
from zabbix_reporter.encoding.sample_encoder import SampleEncoder
from zabbix_reporter.pipeline.reporter import ZabbixReporter

TEST_HOST = "test-host"


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> ReporterConfig:
    """Default configuration with a fixed host name."""
    return ReporterConfig(host_name=TEST_HOST)


@pytest.fixture
def encoder() -> SampleEncoder:
    """Encoder with per-second rates and millisecond durations."""
    return SampleEncoder(
        host_name=TEST_HOST,
        rate_unit=TimeUnit.SECONDS,
        duration_unit=TimeUnit.MILLISECONDS,
    )


@pytest.fixture
def snapshot() -> Snapshot:
    """Distribution whose values are whole milliseconds in nanoseconds."""
    return Snapshot(
        min=1_000_000,
        max=9_000_000,
        mean=2_000_000.0,
        stddev=500_000.0,
        median=1_500_000.0,
        p75=3_000_000.0,
        p95=4_000_000.0,
        p98=5_000_000.0,
        p99=6_000_000.0,
        p999=8_000_000.0,
    )


@pytest.fixture
def histogram(snapshot: Snapshot) -> Histogram:
    return Histogram(count=42, snapshot=snapshot)


@pytest.fixture
def meter() -> Meter:
    return Meter(
        count=10,
        mean_rate=0.5,
        one_minute_rate=1.0,
        five_minute_rate=2.0,
        fifteen_minute_rate=4.0,
    )


@pytest.fixture
def timer(snapshot: Snapshot) -> Timer:
    return Timer(
        count=7,
        mean_rate=0.25,
        one_minute_rate=0.5,
        five_minute_rate=1.0,
        fifteen_minute_rate=2.0,
        snapshot=snapshot,
    )


@pytest.fixture
def recording_sender() -> RecordingSender:
    """Sender that accepts and records every batch."""
    return RecordingSender()


@pytest.fixture
def reporter(
    default_config: ReporterConfig, recording_sender: RecordingSender
) -> ZabbixReporter:
    """Reporter wired to the recording sender."""
    return ZabbixReporter(config=default_config, sender=recording_sender)


@pytest.fixture
def populated_registry(
    histogram: Histogram, meter: Meter, timer: Timer
) -> InMemoryMetricRegistry:
    """Registry resembling a small HTTP service."""
    registry = InMemoryMetricRegistry()
    registry.register("jvm.memory.heap.used", Gauge(value=1024))
    registry.register_gauge("jvm.threads.count", lambda: 12)
    registry.register("orders.api.activeRequests", Counter(count=3))
    registry.register("orders.jobs.completed", Counter(count=99))
    registry.register("orders.payload.size", histogram)
    registry.register("orders.api.responseCodes.ok", meter)
    registry.register("orders.api.createOrder.requests", timer)
    return registry
