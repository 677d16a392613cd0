"""stampkit runtime configuration and settings."""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class StampSettings:
    """Runtime settings for template processing.

    Attributes:
        hidden_marker: Leading character stripped from destination file names (default: "_")
        copy_marker: Leading character that forces a verbatim copy (default: "!")
        name_placeholder: Substring replaced by the project name (default: "name")
        encoding: Text encoding used when reading and writing files (default: "utf-8")
    """

    # Destination name markers
    hidden_marker: str = "_"
    copy_marker: str = "!"

    # Placeholder replaced by the project name in template paths
    name_placeholder: str = "name"

    # File I/O
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "StampSettings":
        """Create settings from environment variables.

        Environment variables:
            STAMP_HIDDEN_MARKER: Hidden-file marker character
            STAMP_COPY_MARKER: Force-copy marker character
            STAMP_NAME_PLACEHOLDER: Project name placeholder
            STAMP_ENCODING: File encoding

        Returns:
            StampSettings instance with values from environment or defaults
        """
        return cls(
            hidden_marker=os.getenv("STAMP_HIDDEN_MARKER", cls.hidden_marker),
            copy_marker=os.getenv("STAMP_COPY_MARKER", cls.copy_marker),
            name_placeholder=os.getenv("STAMP_NAME_PLACEHOLDER", cls.name_placeholder),
            encoding=os.getenv("STAMP_ENCODING", cls.encoding),
        )


# Global settings instance (can be overridden)
_settings: Optional[StampSettings] = None


def get_settings() -> StampSettings:
    """Get the global stampkit settings.

    Returns:
        StampSettings instance (creates from environment if not set)
    """
    global _settings
    if _settings is None:
        _settings = StampSettings.from_env()
    return _settings


def set_settings(settings: Optional[StampSettings]) -> None:
    """Override the global settings (None resets to environment defaults)."""
    global _settings
    _settings = settings
