"""Data models for stampkit."""
from stampkit.models.config import ConfigValidationError, ProjectConfig
from stampkit.models.template import FileAction, ProcessedFile, TemplateFileDescriptor

__all__ = [
    'ConfigValidationError',
    'FileAction',
    'ProcessedFile',
    'ProjectConfig',
    'TemplateFileDescriptor',
]
