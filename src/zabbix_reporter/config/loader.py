"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files and validates using Pydantic models.
Settings may sit at the top level or under a ``reporter:`` section.
Every reporter setting is a scalar, so a profile simply replaces the
keys it names.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from zabbix_reporter.config.models import ReporterConfig

SECTION = "reporter"


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> ReporterConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile whose keys override the file's

        Returns:
            Validated ReporterConfig object

        Raises:
            FileNotFoundError: If config file or profile doesn't exist
            ValueError: If a ``reporter:`` section is not a mapping
            ValidationError: If config is invalid
        """
        settings = self._unwrap(self._load_yaml(self._resolve_path(config_path)))
        if profile:
            settings = {**settings, **self._unwrap(self._load_profile(profile))}
        return ReporterConfig.model_validate(settings)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ReporterConfig:
        """Validate an already parsed configuration."""
        return ReporterConfig.model_validate(self._unwrap(config_dict))

    def _unwrap(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        if SECTION not in config_dict:
            return config_dict
        section = config_dict[SECTION]
        if not isinstance(section, dict):
            raise ValueError(
                f"'{SECTION}' section must be a mapping, got {type(section).__name__}"
            )
        return section

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._load_yaml(profile_path)


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> ReporterConfig:
    """Convenience function to load configuration."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
