"""difftoml - Display the differences between two configuration files.

Flatten two TOML (or YAML/JSON) documents into dotted key-paths and
report the keys found in only one of them and the keys whose values
differ.
"""

from .core.compare import compare_vectors
from .core.diff import DiffOptions, diff_documents
from .core.errors import AsymmetricComparison, DiffTomlError, DocumentError
from .core.filters import Filter, filter_keys
from .core.flatten import flatten
from .core.loader import load_document, open_source
from .core.types import DocumentDiff, KeyOrigins, ValueDiff

__version__ = "0.1.0"

__all__ = [
    "compare_vectors",
    "DiffOptions",
    "diff_documents",
    "AsymmetricComparison",
    "DiffTomlError",
    "DocumentError",
    "Filter",
    "filter_keys",
    "flatten",
    "load_document",
    "open_source",
    "DocumentDiff",
    "KeyOrigins",
    "ValueDiff",
]
