"""Template tree scaffolding.

Concrete generator and template engine behind the templating helpers.
"""

from .core import DryRunGenerator, Generator
from .templates import TemplateEngine

__all__ = [
    "DryRunGenerator",
    "Generator",
    "TemplateEngine",
]
