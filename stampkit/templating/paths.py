"""Path helpers for template destinations and module references."""
import os
import re
from typing import Optional, Tuple

from stampkit.core.config import StampSettings, get_settings

_RELATIVE_PREFIX = re.compile(r"^\.\.?(/|\\)")
_MODULE_SUFFIX = re.compile(r"((/|\\)index\.js|\.js)$")


def join_path(*segments: str) -> str:
    """Join and normalize path segments.

    Unlike os.path.join, a segment starting with a separator does not discard
    the segments before it, so a template name like ``/README.md`` still
    lands inside the destination.
    """
    joined = "/".join(segment for segment in segments if segment)
    if not joined:
        return os.curdir
    return os.path.normpath(joined)


def strip_leading_marker(path: str, marker: str) -> Tuple[str, bool]:
    """Remove marker from the start of path's base name.

    Returns:
        Tuple of (path, whether the marker was stripped)
    """
    base = os.path.basename(path)
    if not marker or not base.startswith(marker):
        return path, False
    return join_path(os.path.dirname(path), base[len(marker):]), True


def destination_for(
    destination: str,
    resolved_name: str,
    settings: Optional[StampSettings] = None,
) -> Tuple[str, bool]:
    """Compute the output path for a template file.

    The hidden marker is stripped first, then the force-copy marker is checked
    against the (possibly already stripped) base name.

    Returns:
        Tuple of (destination path, copy verbatim instead of rendering)
    """
    settings = settings or get_settings()
    dest = join_path(destination, resolved_name)
    dest, _ = strip_leading_marker(dest, settings.hidden_marker)
    dest, copy = strip_leading_marker(dest, settings.copy_marker)
    return dest, copy


def relative_path_to(from_path: str, to_path: str, strip: bool = False) -> str:
    """Return a relative path used to require the 'to' file in the 'from' file.

    Args:
        from_path: File path to the requiring file
        to_path: File path to the required file
        strip: Strip a trailing index.js file name and/or the .js extension

    Returns:
        Relative path to be used in require/import statements
    """
    from_dir = from_path.replace(os.path.basename(from_path), "", 1)
    rel_path = os.path.relpath(to_path, from_dir or os.curdir)
    if rel_path == os.curdir:
        rel_path = ""
    if _RELATIVE_PREFIX.match(rel_path) is None:
        rel_path = "./" + rel_path
    if strip:
        return _MODULE_SUFFIX.sub("", rel_path)
    return rel_path
