"""
Metric Registry Protocol.

Defines the read-only view of a metrics registry that the reporter
pulls snapshots from on each cycle.

Design Notes:
    - Each getter returns a fresh mapping ordered by metric name
    - The filter is applied by the registry, not by the reporter
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from zabbix_reporter.domain.entities import Counter, Gauge, Histogram, Meter, Timer

# Predicate deciding whether a metric takes part in reporting: (name, metric) -> bool
MetricFilter = Callable[[str, Any], bool]


def accept_all(name: str, metric: Any) -> bool:
    """Default filter: every metric is reported."""
    return True


@runtime_checkable
class MetricRegistryProtocol(Protocol):
    """Abstract interface for a metrics registry snapshot source."""

    def get_gauges(
        self, metric_filter: Optional[MetricFilter] = None
    ) -> Mapping[str, Gauge]:
        ...

    def get_counters(
        self, metric_filter: Optional[MetricFilter] = None
    ) -> Mapping[str, Counter]:
        ...

    def get_histograms(
        self, metric_filter: Optional[MetricFilter] = None
    ) -> Mapping[str, Histogram]:
        ...

    def get_meters(
        self, metric_filter: Optional[MetricFilter] = None
    ) -> Mapping[str, Meter]:
        ...

    def get_timers(
        self, metric_filter: Optional[MetricFilter] = None
    ) -> Mapping[str, Timer]:
        ...
