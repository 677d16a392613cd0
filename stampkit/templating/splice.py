"""Marker-relative text splicing.

Inserts a block of lines after the last line containing a marker, indented
like the marker line. Insertion is skipped when the block is already present,
so rewriting the same file twice is harmless.
"""
import os
import re
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from stampkit.core.config import get_settings
from stampkit.core.logger import get_logger
from stampkit.templating.paths import join_path

logger = get_logger(__name__)


@dataclass
class RewriteRequest:
    """Arguments for a splice.

    Attributes:
        haystack: Text to rewrite (filled from disk by rewrite_file)
        marker: Substring locating the insertion line
        splicable: Lines to insert, in order
        path: Base directory for rewrite_file (defaults to the working directory)
        file: File name relative to path, for rewrite_file
    """
    marker: str
    splicable: List[str]
    haystack: str = ""
    path: Optional[str] = None
    file: Optional[str] = None

    def __post_init__(self):
        self.splicable = list(self.splicable)
        if not self.splicable:
            raise ValueError("splicable must contain at least one line")


def splice_pattern(splicable: Sequence[str]) -> "re.Pattern[str]":
    """Build the pattern matching splicable lines as one consecutive block."""
    return re.compile("\n".join(r"\s*" + re.escape(line) for line in splicable))


def is_already_spliced(haystack: str, splicable: Sequence[str]) -> bool:
    """Return True if the splicable block already appears in haystack."""
    return splice_pattern(splicable).search(haystack) is not None


def find_marker_line(lines: Sequence[str], marker: str) -> Optional[int]:
    """Return the index of the last line containing marker, or None."""
    index = None
    for i, line in enumerate(lines):
        if marker in line:
            index = i
    return index


def leading_spaces(line: str) -> int:
    """Count leading space characters (tabs do not count)."""
    return len(line) - len(line.lstrip(" "))


def rewrite(request: RewriteRequest) -> str:
    """Rewrite a body of text.

    Args:
        request: Haystack, marker and lines to splice

    Returns:
        The rewritten text, or the haystack unchanged when the block is
        already present or no line contains the marker
    """
    if is_already_spliced(request.haystack, request.splicable):
        logger.debug("Splice skipped: block already present")
        return request.haystack

    lines = request.haystack.split("\n")

    marker_index = find_marker_line(lines, request.marker)
    if marker_index is None:
        logger.debug(f"Splice skipped: marker '{request.marker}' not found")
        return request.haystack

    indent = " " * leading_spaces(lines[marker_index])
    block = "\n".join(indent + line for line in request.splicable)
    lines.insert(marker_index + 1, block)

    return "\n".join(lines)


def rewrite_file(request: RewriteRequest) -> str:
    """Rewrite a single file in place.

    Args:
        request: Marker, lines, base path and file name

    Returns:
        The new file body

    Raises:
        ValueError: If request has no file
        OSError: If the file cannot be read or written
    """
    if not request.file:
        raise ValueError("rewrite_file requires a file name")

    base = request.path or os.getcwd()
    full_path = join_path(base, request.file)
    encoding = get_settings().encoding

    # newline="" keeps line endings byte-for-byte
    with open(full_path, encoding=encoding, newline="") as f:
        haystack = f.read()

    body = rewrite(replace(request, haystack=haystack))

    with open(full_path, "w", encoding=encoding, newline="") as f:
        f.write(body)
    if body != haystack:
        logger.debug(f"Spliced {len(request.splicable)} line(s) into {full_path}")
    return body
