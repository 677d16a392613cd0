"""YAML project configuration loader."""
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from stampkit.core.logger import get_logger
from stampkit.models.config import ConfigValidationError, ProjectConfig

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = ".stamp.yml"


class ConfigLoader:
    """Loads the project configuration store (name, filters, template context)."""

    def __init__(self, config_path: str = DEFAULT_CONFIG_FILE):
        self.config_path = Path(config_path)
        self.raw_config: Optional[Dict[str, Any]] = None
        self.config: Optional[ProjectConfig] = None

    def load(self) -> ProjectConfig:
        """Load YAML configuration from file.

        A missing or empty file yields an empty configuration.

        Raises:
            ConfigValidationError: If the file content is malformed
        """
        if not self.config_path.exists():
            logger.debug(f"No config file at {self.config_path}; using defaults")
            self.raw_config = {}
        else:
            with open(self.config_path) as f:
                try:
                    self.raw_config = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigValidationError(f"Invalid YAML in {self.config_path}: {e}") from e

        self.config = self.validate(self.raw_config)
        return self.config

    def validate(self, raw: Any) -> ProjectConfig:
        """Check the raw YAML structure and build a ProjectConfig."""
        if not isinstance(raw, dict):
            raise ConfigValidationError(
                f"{self.config_path}: expected a mapping at the top level, got {type(raw).__name__}"
            )

        name = raw.get('name')
        if name is not None and not isinstance(name, str):
            raise ConfigValidationError(f"{self.config_path}: 'name' must be a string")

        filters = raw.get('filters') or {}
        if not isinstance(filters, dict):
            raise ConfigValidationError(
                f"{self.config_path}: 'filters' must map filter names to flags"
            )
        for tag, enabled in filters.items():
            if isinstance(enabled, (dict, list)):
                raise ConfigValidationError(
                    f"{self.config_path}: filter '{tag}' must be a flag, got {type(enabled).__name__}"
                )

        context = raw.get('context') or {}
        if not isinstance(context, dict):
            raise ConfigValidationError(f"{self.config_path}: 'context' must be a mapping")

        return ProjectConfig(
            name=name,
            filters={str(tag): bool(enabled) for tag, enabled in filters.items()},
            context=dict(context),
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Return a configuration value, loading the file on first access."""
        if self.config is None:
            self.load()
        value = getattr(self.config, key, None)
        return default if value is None else value

    def get_filters(self) -> Mapping[str, bool]:
        """Return the filter configuration (tag -> enabled)."""
        return dict(self.get('filters', {}))
