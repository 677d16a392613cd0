"""Process a template directory, filtering and templating accordingly."""
from typing import List, Mapping, Optional

from stampkit.core.config import StampSettings, get_settings
from stampkit.core.logger import get_logger
from stampkit.models.template import FileAction, ProcessedFile, TemplateFileDescriptor
from stampkit.templating.filters import enabled_filters, filter_file, is_usable
from stampkit.templating.host import GeneratorHost
from stampkit.templating.paths import destination_for, join_path

logger = get_logger(__name__)


class DirectoryProcessor:
    """Stamps a template tree into a destination through a generator host."""

    def __init__(
        self,
        host: GeneratorHost,
        filters: Optional[Mapping[str, bool]] = None,
        settings: Optional[StampSettings] = None,
    ):
        """Initialize processor.

        Args:
            host: Generator providing enumeration, copy and template services
            filters: Filter configuration (tag -> enabled); read only
            settings: Marker and placeholder settings (defaults to global settings)
        """
        self.host = host
        self.enabled = enabled_filters(filters)
        self.settings = settings or get_settings()

    def resolve_root(self, source: str) -> str:
        """Resolve source against the host's source root unless absolute."""
        if self.host.is_path_absolute(source):
            return source
        return join_path(self.host.source_root(), source)

    def describe(self, template_path: str) -> TemplateFileDescriptor:
        """Parse filters and apply project-name substitution to a template path."""
        descriptor = filter_file(template_path)
        if self.host.name:
            descriptor.resolved_name = descriptor.resolved_name.replace(
                self.settings.name_placeholder, self.host.name, 1
            )
        return descriptor

    def process_file(self, root: str, template_path: str, destination: str) -> ProcessedFile:
        """Dispatch a single template file to copy or template, or skip it."""
        descriptor = self.describe(template_path)
        src = join_path(root, template_path)
        dest, copy = destination_for(destination, descriptor.resolved_name, self.settings)

        if not is_usable(descriptor.filters, self.enabled):
            logger.debug(f"Skipped {template_path} (filters: {', '.join(descriptor.filters)})")
            return ProcessedFile(src, dest, descriptor, FileAction.SKIP)

        if copy:
            self.host.copy(src, dest)
            action = FileAction.COPY
        else:
            self.host.template(src, dest)
            action = FileAction.TEMPLATE

        logger.debug(f"{action.value}: {template_path} -> {dest}")
        return ProcessedFile(src, dest, descriptor, action)

    def process(self, source: str, destination: str) -> List[ProcessedFile]:
        """Process an entire template directory.

        Args:
            source: Template directory (absolute, or relative to the host's source root)
            destination: Directory the processed files are written to

        Returns:
            One ProcessedFile per enumerated template file, in enumeration order
        """
        root = self.resolve_root(source)
        files = self.host.expand_files("**", dot=True, cwd=root)

        results = [self.process_file(root, f, destination) for f in files]

        written = sum(1 for r in results if r.written)
        logger.debug(
            f"Processed {root}: {written} written, {len(results) - written} skipped"
        )
        return results


def process_directory(
    host: GeneratorHost,
    source: str,
    destination: str,
    filters: Optional[Mapping[str, bool]] = None,
) -> List[ProcessedFile]:
    """Process an entire directory filtering and templating accordingly.

    Args:
        host: The generator
        source: Path to the directory to be processed
        destination: Path the processed directory is written to
        filters: Filter configuration (tag -> enabled)

    Returns:
        List of ProcessedFile records
    """
    return DirectoryProcessor(host, filters).process(source, destination)
