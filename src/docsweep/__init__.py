"""docsweep: docstring and comment extraction from parsed declaration trees."""

from docsweep.collect import ExtractedDocs, ModuleData, extract_docstrings
from docsweep.hooks import HookRegistry

__version__ = "0.1.0"

__all__ = [
    "ExtractedDocs",
    "HookRegistry",
    "ModuleData",
    "extract_docstrings",
    "__version__",
]
