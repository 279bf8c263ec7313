"""
Discovery Package - Low-Level Discovery Document Synthesis.

Components:
    - DiscoveryFamily: Tag, item key and name patterns of one document
    - DiscoverySynthesizer: Builds documents and samples per cycle
"""

from zabbix_reporter.discovery.synthesizer import (
    API,
    COUNTER_API,
    FAMILIES,
    METER_API,
    TIMER_API,
    DiscoveryFamily,
    DiscoverySynthesizer,
)

__all__ = [
    "API",
    "COUNTER_API",
    "FAMILIES",
    "METER_API",
    "TIMER_API",
    "DiscoveryFamily",
    "DiscoverySynthesizer",
]
