"""Template file models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class FileAction(Enum):
    """What the directory processor did with a template file."""
    COPY = "copy"            # Copied verbatim
    TEMPLATE = "template"    # Rendered through the template engine
    SKIP = "skip"            # Filtered out


@dataclass
class TemplateFileDescriptor:
    """A template file path with its filter annotations resolved."""
    raw_name: str                       # Path relative to the template root
    resolved_name: str                  # Filters stripped, placeholder replaced
    filters: List[str] = field(default_factory=list)


@dataclass
class ProcessedFile:
    """Outcome of processing one template file."""
    source: str
    destination: str
    descriptor: TemplateFileDescriptor
    action: FileAction

    @property
    def written(self) -> bool:
        """True if the file produced output."""
        return self.action is not FileAction.SKIP
