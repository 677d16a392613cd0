"""Project configuration loading."""
from stampkit.config.loader import DEFAULT_CONFIG_FILE, ConfigLoader

__all__ = ['ConfigLoader', 'DEFAULT_CONFIG_FILE']
