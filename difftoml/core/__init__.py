from .compare import compare_vectors
from .diff import DiffOptions, diff_documents, diff_flattened
from .errors import AsymmetricComparison, DiffTomlError, DocumentError
from .filters import Filter, filter_keys
from .flatten import flatten
from .types import DocumentDiff, Key, KeyOrigins, ValueDiff

__all__ = [
    "compare_vectors",
    "DiffOptions",
    "diff_documents",
    "diff_flattened",
    "AsymmetricComparison",
    "DiffTomlError",
    "DocumentError",
    "Filter",
    "filter_keys",
    "flatten",
    "DocumentDiff",
    "Key",
    "KeyOrigins",
    "ValueDiff",
]
