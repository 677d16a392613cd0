"""Filesystem-backed generator for stamping template trees."""

import os
import shutil
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from stampkit.config.loader import ConfigLoader
from stampkit.core.config import get_settings
from stampkit.core.logger import get_logger
from stampkit.models.template import ProcessedFile
from stampkit.scaffold.templates import TemplateEngine
from stampkit.templating.directory import process_directory
from stampkit.templating.host import GeneratorHost
from stampkit.templating.splice import RewriteRequest, rewrite_file

logger = get_logger(__name__)


class Generator(GeneratorHost):
    """Stamps template directories onto the local filesystem."""

    def __init__(
        self,
        template_dir: Optional[Path] = None,
        name: Optional[str] = None,
        filters: Optional[Mapping[str, bool]] = None,
        context: Optional[Dict[str, Any]] = None,
        engine: Optional[TemplateEngine] = None,
    ):
        """Initialize generator.

        Args:
            template_dir: Root that relative template sources resolve against
                (defaults to ./templates)
            name: Project name substituted into template paths and passed to templates
            filters: Filter configuration (tag -> enabled)
            context: Extra template variables
            engine: Template engine (defaults to a Jinja2 TemplateEngine)
        """
        self.template_dir = Path(template_dir) if template_dir else Path.cwd() / "templates"
        self.name = name
        self.filters: Dict[str, bool] = dict(filters or {})
        self.context: Dict[str, Any] = dict(context or {})
        self.engine = engine or TemplateEngine()

    @classmethod
    def from_config(
        cls,
        loader: ConfigLoader,
        template_dir: Optional[Path] = None,
        name: Optional[str] = None,
        extra_filters: Sequence[str] = (),
    ) -> "Generator":
        """Build a generator from a project configuration file.

        Args:
            loader: Configuration loader
            template_dir: Template root override
            name: Project name override (falls back to the configured name)
            extra_filters: Filter tags to enable on top of the configured ones
        """
        config = loader.load()
        filters = dict(config.filters)
        for tag in extra_filters:
            filters[tag] = True
        return cls(
            template_dir=template_dir,
            name=name or config.name,
            filters=filters,
            context=config.context,
        )

    def source_root(self) -> str:
        return str(self.template_dir)

    def is_path_absolute(self, path: str) -> bool:
        return os.path.isabs(path)

    def expand_files(self, pattern: str, dot: bool = False, cwd: Optional[str] = None) -> List[str]:
        """List regular files under cwd matching pattern, sorted, as POSIX relative paths."""
        root = Path(cwd) if cwd else Path.cwd()
        if not root.is_dir():
            raise FileNotFoundError(f"Template directory not found: {root}")

        matches = root.rglob("*") if pattern == "**" else root.glob(pattern)
        files = []
        for path in matches:
            if not path.is_file():
                continue
            relative = path.relative_to(root)
            if not dot and any(part.startswith(".") for part in relative.parts):
                continue
            files.append(relative.as_posix())
        return sorted(files)

    def template_context(self) -> Dict[str, Any]:
        """Variables available to every rendered template."""
        context = dict(self.context)
        context.setdefault("name", self.name)
        context.setdefault("filters", {tag for tag, on in self.filters.items() if on})
        return context

    def copy(self, src: str, dest: str) -> None:
        dest_path = Path(dest)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest_path)
        logger.debug(f"Copied {src} -> {dest}")

    def template(self, src: str, dest: str) -> None:
        rendered = self.engine.render_template(Path(src), self.template_context())
        dest_path = Path(dest)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        dest_path.write_text(rendered, encoding=get_settings().encoding)
        shutil.copymode(src, dest_path)
        logger.debug(f"Rendered {src} -> {dest}")

    def process_directory(self, source: str, destination: str) -> List[ProcessedFile]:
        """Process a template directory with this generator's filters."""
        results = process_directory(self, source, destination, self.filters)
        written = sum(1 for r in results if r.written)
        logger.info(f"✨ Stamped {written} file(s) into {destination}")
        return results

    def rewrite_file(
        self,
        file: str,
        marker: str,
        splicable: Sequence[str],
        path: Optional[str] = None,
    ) -> str:
        """Splice lines into an existing file after its last marker line."""
        return rewrite_file(
            RewriteRequest(marker=marker, splicable=list(splicable), path=path, file=file)
        )


class DryRunGenerator(Generator):
    """Generator that records what it would write without touching the filesystem."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.operations: List[tuple] = []

    def copy(self, src: str, dest: str) -> None:
        self.operations.append(("copy", src, dest))

    def template(self, src: str, dest: str) -> None:
        self.operations.append(("template", src, dest))

    def process_directory(self, source: str, destination: str) -> List[ProcessedFile]:
        return process_directory(self, source, destination, self.filters)
