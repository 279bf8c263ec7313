"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for all
external collaborators. The reporter depends on these abstractions, not on
concrete registries or senders.

Protocols:
    - SenderProtocol: Transport delivering samples to the collector
    - MetricRegistryProtocol: Read-only metric snapshot source

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
"""

from zabbix_reporter.interfaces.metric_registry import (
    MetricFilter,
    MetricRegistryProtocol,
    accept_all,
)
from zabbix_reporter.interfaces.sender import SenderProtocol, TransportError

__all__ = [
    "MetricFilter",
    "MetricRegistryProtocol",
    "accept_all",
    "SenderProtocol",
    "TransportError",
]
