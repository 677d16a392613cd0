"""Filename filter annotations.

A template path may carry parenthesized tags, e.g. ``src/(docker)Dockerfile``.
The tags are stripped from the output name and the file is only emitted when
every tag is enabled in the project's filter configuration.
"""
import re
from typing import Iterable, List, Mapping, Optional, Set, Tuple

from stampkit.models.template import TemplateFileDescriptor

FILTER_PATTERN = re.compile(r"\(([^)]+)\)")


def parse_filter_name(raw_template_path: str) -> Tuple[str, List[str]]:
    """Split a template path into its stripped path and filter tags.

    Args:
        raw_template_path: Template path, possibly containing ``(tag)`` groups

    Returns:
        Tuple of (path without the groups, tags in left-to-right order)
    """
    filters: List[str] = []

    def _collect(match: "re.Match[str]") -> str:
        filters.append(match.group(1))
        return ""

    stripped = FILTER_PATTERN.sub(_collect, raw_template_path)
    return stripped, filters


def filter_file(raw_template_path: str) -> TemplateFileDescriptor:
    """Parse a template path into a descriptor."""
    stripped, filters = parse_filter_name(raw_template_path)
    return TemplateFileDescriptor(
        raw_name=raw_template_path,
        resolved_name=stripped,
        filters=filters,
    )


def enabled_filters(filter_config: Optional[Mapping[str, bool]]) -> Set[str]:
    """Return the tags switched on in a filter configuration."""
    if not filter_config:
        return set()
    return {tag for tag, enabled in filter_config.items() if enabled}


def is_usable(file_filters: Iterable[str], enabled: Set[str]) -> bool:
    """Check whether a file's filters are all enabled.

    A file without filters is always usable.
    """
    return all(tag in enabled for tag in file_filters)


def template_is_usable(
    descriptor: TemplateFileDescriptor,
    filter_config: Optional[Mapping[str, bool]],
) -> bool:
    """Check a descriptor against a filter configuration."""
    return is_usable(descriptor.filters, enabled_filters(filter_config))
