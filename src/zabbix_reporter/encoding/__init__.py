"""
Encoding Package - Metric to Sample Translation.

Components:
    - format_key: Pure item key construction
    - convert_rate / convert_duration: Unit conversion
    - SampleEncoder: Per-kind metric expansion into samples
"""

from zabbix_reporter.encoding.keys import format_key
from zabbix_reporter.encoding.sample_encoder import SampleEncoder
from zabbix_reporter.encoding.units import convert_duration, convert_rate

__all__ = ["format_key", "SampleEncoder", "convert_duration", "convert_rate"]
