"""Templating helpers: splicing, filename filters and directory processing."""

from .directory import DirectoryProcessor, process_directory
from .filters import (
    enabled_filters,
    filter_file,
    is_usable,
    parse_filter_name,
    template_is_usable,
)
from .host import GeneratorHost
from .paths import destination_for, join_path, relative_path_to
from .splice import (
    RewriteRequest,
    find_marker_line,
    is_already_spliced,
    leading_spaces,
    rewrite,
    rewrite_file,
)

__all__ = [
    "DirectoryProcessor",
    "GeneratorHost",
    "RewriteRequest",
    "destination_for",
    "enabled_filters",
    "filter_file",
    "find_marker_line",
    "is_already_spliced",
    "is_usable",
    "join_path",
    "leading_spaces",
    "parse_filter_name",
    "process_directory",
    "relative_path_to",
    "rewrite",
    "rewrite_file",
    "template_is_usable",
]
