"""Abstract interface for generators driving the directory processor."""
from abc import ABC, abstractmethod
from typing import List, Optional


class GeneratorHost(ABC):
    """Services a generator provides to the directory processor."""

    #: Project name substituted into template paths (None disables substitution)
    name: Optional[str] = None

    @abstractmethod
    def source_root(self) -> str:
        """Return the base directory relative template sources resolve against."""
        pass

    @abstractmethod
    def is_path_absolute(self, path: str) -> bool:
        """Return True if path is absolute."""
        pass

    @abstractmethod
    def expand_files(self, pattern: str, dot: bool = False, cwd: Optional[str] = None) -> List[str]:
        """List files matching a glob pattern.

        Args:
            pattern: Glob pattern (``**`` matches every file recursively)
            dot: Include dot-files and dot-directories
            cwd: Directory to search from

        Returns:
            Matching file paths relative to cwd, in processing order
        """
        pass

    @abstractmethod
    def copy(self, src: str, dest: str) -> None:
        """Copy src to dest verbatim."""
        pass

    @abstractmethod
    def template(self, src: str, dest: str) -> None:
        """Render src through the template engine and write it to dest."""
        pass
