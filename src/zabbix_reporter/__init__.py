"""
Zabbix Reporter - Metrics Registry to Zabbix Reporting.

Periodically harvests gauges, counters, histograms, meters and timers
from a metrics registry, flattens them into Zabbix item samples and
ships them to a collector together with low-level discovery (LLD)
documents, so per-endpoint items are created automatically.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability (sender, registry, logger)
    - Immutable configuration via Pydantic, loadable from YAML

Main Components:
    - domain: Metric values, samples, discovery documents, results
    - interfaces: Protocols for sender and metric registry
    - encoding: Key formatting, unit conversion, sample encoding
    - discovery: LLD document synthesis
    - pipeline: ZabbixReporter orchestrating one cycle
    - config: Configuration model, YAML loader, fluent builder
    - adapters: In-memory registry, recording sender, host resolution
    - scheduling: Periodic cycle trigger

Example:
    >>> from zabbix_reporter.config.builder import ReporterBuilder
    >>> reporter = ReporterBuilder.for_registry(registry).build(sender)
    >>> report = reporter.report_registry()
    >>> print(f"Sent {report.sample_count} samples, success={report.success}")

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Zabbix Reporter.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import zabbix_reporter
        >>> zabbix_reporter.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("zabbix_reporter").setLevel(level)
