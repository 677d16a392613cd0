"""Configuration models and errors."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class ConfigValidationError(Exception):
    """Raised when a project configuration file is malformed."""
    pass


@dataclass
class ProjectConfig:
    """Validated contents of a project configuration file."""
    name: Optional[str] = None
    filters: Dict[str, bool] = field(default_factory=dict)
    context: Dict[str, Any] = field(default_factory=dict)
