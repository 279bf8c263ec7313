"""
Configuration Package - Models, Loaders and Builder.

This package handles all configuration aspects of the reporter:
    - Pydantic model for type-safe, immutable configuration
    - YAML loader with validation and profile overlays
    - Fluent builder (zabbix_reporter.config.builder) for code-first setup

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Immutable once built
"""

from zabbix_reporter.config.loader import ConfigLoader, load_config
from zabbix_reporter.config.models import DEFAULT_REPORTER_NAME, ReporterConfig

__all__ = ["ConfigLoader", "load_config", "DEFAULT_REPORTER_NAME", "ReporterConfig"]
