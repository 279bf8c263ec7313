"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the abstract
interfaces defined in the interfaces package. Following the
Hexagonal Architecture (Ports & Adapters) pattern.

Registries:
    - InMemoryMetricRegistry: Metric snapshots held in memory

Senders:
    - RecordingSender: Records batches instead of sending them

Host resolution:
    - detect_host_name: Local host name lookup

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from zabbix_reporter.adapters.host_resolver import detect_host_name
from zabbix_reporter.adapters.memory_registry import InMemoryMetricRegistry
from zabbix_reporter.adapters.recording_sender import RecordingSender

__all__ = [
    "detect_host_name",
    "InMemoryMetricRegistry",
    "RecordingSender",
]
