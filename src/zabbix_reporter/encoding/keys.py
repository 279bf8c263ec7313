"""Item key construction for Zabbix samples."""

from __future__ import annotations

GAUGE = "gauge"
COUNTERS = "counters"
HISTOGRAMS = "histograms"
METERS = "meters"
TIMERS = "timers"

# Suffix order shared by histogram and timer distributions
SNAPSHOT_SUFFIXES = (
    ".min",
    ".max",
    ".mean",
    ".stddev",
    ".median",
    ".p75",
    ".p95",
    ".p98",
    ".p99",
    ".p999",
)

METER_SUFFIXES = (
    ".count",
    ".meanRate",
    ".1-minuteRate",
    ".5-minuteRate",
    ".15-minuteRate",
)


def format_key(kind: str, suffix: str, name: str) -> str:
    """
    Build an item key of the form ``<kind><suffix>[<name>]``.

    Example:
        >>> format_key("timers", ".p75", "api.users.requests")
        'timers.p75[api.users.requests]'
    """
    return f"{kind}{suffix}[{name}]"
