"""
In-Memory Metric Registry.

A simple snapshot source that stores metric values in memory. Gauges may
be registered as suppliers that are called on every snapshot.
"""

from __future__ import annotations

from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

from zabbix_reporter.domain.entities import Counter, Gauge, Histogram, Meter, Timer
from zabbix_reporter.interfaces.metric_registry import MetricFilter, accept_all

M = TypeVar("M", Counter, Histogram, Meter, Timer)

GaugeSupplier = Callable[[], Any]


class InMemoryMetricRegistry:
    """Thread-safe in-memory metric registry."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._metrics: Dict[str, Union[Gauge, GaugeSupplier, Counter, Histogram, Meter]] = {}
        self._lock = Lock()

    def register(self, name: str, metric: Union[Gauge, Counter, Histogram, Meter]) -> None:
        """
        Register or replace a metric value.

        Args:
            name: Dot-delimited metric name
            metric: Gauge, Counter, Histogram, Meter or Timer snapshot

        Raises:
            TypeError: If metric is not a supported kind
        """
        if not isinstance(metric, (Gauge, Counter, Histogram, Meter)):
            raise TypeError(f"Unsupported metric type for {name}: {type(metric).__name__}")
        with self._lock:
            self._metrics[name] = metric

    def register_gauge(self, name: str, supplier: GaugeSupplier) -> None:
        """Register a gauge whose value is read from ``supplier`` on each snapshot."""
        with self._lock:
            self._metrics[name] = supplier

    def increment(self, name: str, amount: int = 1) -> Counter:
        """Increment a counter, creating it at zero if missing."""
        with self._lock:
            current = self._metrics.get(name)
            if current is not None and not isinstance(current, Counter):
                raise TypeError(f"{name} is not a counter")
            count = current.count if current is not None else 0
            counter = Counter(count=count + amount)
            self._metrics[name] = counter
            return counter

    def remove(self, name: str) -> bool:
        """Remove a metric. Returns True if it existed."""
        with self._lock:
            return self._metrics.pop(name, None) is not None

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._metrics)

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()

    def get_gauges(self, metric_filter: Optional[MetricFilter] = None) -> Dict[str, Gauge]:
        with self._lock:
            entries = [
                (name, metric)
                for name, metric in self._metrics.items()
                if isinstance(metric, Gauge) or callable(metric)
            ]

        # Suppliers run outside the lock; they may be slow or touch the registry
        gauges = {}
        for name, metric in sorted(entries, key=lambda item: item[0]):
            gauge = metric if isinstance(metric, Gauge) else Gauge(value=metric())
            if (metric_filter or accept_all)(name, gauge):
                gauges[name] = gauge
        return gauges

    def get_counters(self, metric_filter: Optional[MetricFilter] = None) -> Dict[str, Counter]:
        return self._select(Counter, metric_filter)

    def get_histograms(
        self, metric_filter: Optional[MetricFilter] = None
    ) -> Dict[str, Histogram]:
        return self._select(Histogram, metric_filter)

    def get_meters(self, metric_filter: Optional[MetricFilter] = None) -> Dict[str, Meter]:
        return self._select(Meter, metric_filter, exclude=Timer)

    def get_timers(self, metric_filter: Optional[MetricFilter] = None) -> Dict[str, Timer]:
        return self._select(Timer, metric_filter)

    def _select(
        self,
        kind: Type[M],
        metric_filter: Optional[MetricFilter],
        exclude: Optional[type] = None,
    ) -> Dict[str, M]:
        """Name-sorted metrics of one kind accepted by the filter."""
        accept = metric_filter or accept_all
        with self._lock:
            return {
                name: metric
                for name, metric in sorted(self._metrics.items(), key=lambda item: item[0])
                if isinstance(metric, kind)
                and not (exclude is not None and isinstance(metric, exclude))
                and accept(name, metric)
            }
