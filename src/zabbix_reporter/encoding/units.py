"""Rate and duration unit conversion."""

from __future__ import annotations

from zabbix_reporter.domain.entities import TimeUnit


def convert_rate(rate: float, unit: TimeUnit) -> float:
    """Convert a per-second rate to a per-``unit`` rate."""
    return rate * unit.seconds


def convert_duration(duration: float, unit: TimeUnit) -> float:
    """Convert a nanosecond duration to ``unit``."""
    return duration / unit.nanos
