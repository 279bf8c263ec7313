"""
Reporter Builder - Fluent Construction of Reporters.

Usage:
    reporter = (
        ReporterBuilder.for_registry(registry)
        .host_name("app-01")
        .convert_rates_to(TimeUnit.MINUTES)
        .convert_durations_to(TimeUnit.MILLISECONDS)
        .build(sender)
    )

Every option returns a new builder; the accumulated options become an
immutable ReporterConfig when the reporter is built.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from zabbix_reporter.adapters.host_resolver import detect_host_name
from zabbix_reporter.config.models import ReporterConfig
from zabbix_reporter.domain.entities import TimeUnit
from zabbix_reporter.interfaces.metric_registry import MetricFilter, MetricRegistryProtocol
from zabbix_reporter.interfaces.sender import SenderProtocol
from zabbix_reporter.pipeline.reporter import ZabbixReporter


class ReporterBuilder:
    """Immutable fluent builder for ZabbixReporter."""

    def __init__(
        self,
        registry: Optional[MetricRegistryProtocol] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._registry = registry
        self._options: Dict[str, Any] = dict(options or {})

    @classmethod
    def for_registry(cls, registry: MetricRegistryProtocol) -> "ReporterBuilder":
        return cls(registry)

    def _with(self, **options: Any) -> "ReporterBuilder":
        return ReporterBuilder(self._registry, {**self._options, **options})

    def name(self, name: str) -> "ReporterBuilder":
        return self._with(name=name)

    def host_name(self, host_name: str) -> "ReporterBuilder":
        return self._with(host_name=host_name)

    def prefix(self, prefix: str) -> "ReporterBuilder":
        return self._with(prefix=prefix)

    def convert_rates_to(self, rate_unit: TimeUnit) -> "ReporterBuilder":
        return self._with(rate_unit=rate_unit)

    def convert_durations_to(self, duration_unit: TimeUnit) -> "ReporterBuilder":
        return self._with(duration_unit=duration_unit)

    def filter(self, metric_filter: MetricFilter) -> "ReporterBuilder":
        return self._with(metric_filter=metric_filter)

    def replace_percent_sign(self, replace_percent_sign: str) -> "ReporterBuilder":
        return self._with(replace_percent_sign=replace_percent_sign)

    def interval(self, interval_seconds: float) -> "ReporterBuilder":
        return self._with(interval_seconds=interval_seconds)

    def build_config(
        self,
        logger: Optional[logging.Logger] = None,
        host_resolver: Optional[Callable[[], str]] = None,
    ) -> ReporterConfig:
        """
        Validate accumulated options into an immutable config.

        The host name comes from ``host_resolver`` (local host name detection
        by default) when none was given.

        Raises:
            ValidationError: If an option is invalid
        """
        return ReporterConfig(**self._options).with_resolved_host(
            host_resolver or detect_host_name, logger
        )

    def build(
        self,
        sender: SenderProtocol,
        logger: Optional[logging.Logger] = None,
    ) -> ZabbixReporter:
        """
        Build a reporter sending through ``sender``.

        Args:
            sender: Transport to the collector
            logger: Optional injected logger for the reporter

        Returns:
            Configured ZabbixReporter bound to the builder's registry
        """
        return ZabbixReporter(
            config=self.build_config(logger),
            sender=sender,
            registry=self._registry,
            logger=logger,
        )
