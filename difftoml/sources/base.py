"""Shared behaviour for file-backed document sources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..core.errors import DocumentError
from ..core.source import Source
from ..core.types import ValueKind, value_kind

logger = logging.getLogger(__name__)


def check_values(value: Any, origin: str) -> None:
    """Reject values no configuration format produces, e.g. YAML ``!!binary``.

    Raises:
        DocumentError: If any value in the tree has an unsupported type.
    """
    try:
        kind = value_kind(value)
    except TypeError as exc:
        raise DocumentError(f"{origin} holds an unsupported value: {exc}") from exc
    if kind is ValueKind.ARRAY:
        for item in value:
            check_values(item, origin)
    elif kind is ValueKind.TABLE:
        for item in value.values():
            check_values(item, origin)


def ensure_table(data: Any, origin: str) -> Dict[str, Any]:
    """Check that a parsed document's root is a table of supported values.

    An empty document (YAML ``null``) counts as an empty table.
    """
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise DocumentError(
            f"Document root of {origin} is a {type(data).__name__}, expected a table"
        )
    check_values(data, origin)
    return dict(data)


class FileSource(Source):
    """Base class for sources that read one document from disk.

    Subclasses set ``extension`` and implement ``parse``.
    """

    extension: Optional[str] = None

    def __init__(self, path: Path, name: Optional[str] = None):
        """Initialize the source.

        Args:
            path: Path to the document.
            name: Optional custom name for this source.
        """
        self.path = Path(path)
        self.name = name or str(self.path)
        self.id = str(self.path.resolve())

    def parse(self, text: str) -> Any:
        raise NotImplementedError

    def read(self) -> str:
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise DocumentError(f"Error reading {self.path}: {exc}") from exc
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentError(f"{self.path} is not valid UTF-8") from exc

    def load(self) -> Dict[str, Any]:
        data = ensure_table(self.parse(self.read()), str(self.path))
        logger.debug("Loaded %d top-level keys from %s", len(data), self.path)
        return data
