"""Template engine for scaffolding."""

from pathlib import Path
from typing import Any, Dict

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError

from stampkit.core.config import get_settings
from stampkit.core.logger import get_logger

logger = get_logger(__name__)


class TemplateEngine:
    """Renders template files with Jinja2."""

    def __init__(self, strict: bool = False):
        """Initialize engine.

        Args:
            strict: Fail on undefined template variables instead of rendering them empty
        """
        options: Dict[str, Any] = {}
        if strict:
            options["undefined"] = StrictUndefined
        self.jinja_env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            **options,
        )

    def render_string(self, source: str, context: Dict[str, Any]) -> str:
        """Render template text with the given context."""
        return self.jinja_env.from_string(source).render(**context)

    def render_template(self, template_path: Path, context: Dict[str, Any]) -> str:
        """Render a template file with the given context.

        Raises:
            TemplateError: If rendering fails
            OSError: If the template cannot be read
        """
        source = Path(template_path).read_text(encoding=get_settings().encoding)
        try:
            return self.render_string(source, context)
        except TemplateError as e:
            logger.error(f"Failed to render template {template_path}: {e}")
            raise
