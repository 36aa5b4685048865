"""Source protocol for configuration documents."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol


class Source(Protocol):
    """Protocol defining the interface for document sources.

    A source knows where one configuration document lives and how to
    parse it into a tree of tables and leaf values.
    """

    id: str
    name: str
    extension: Optional[str]

    def load(self) -> Dict[str, Any]:
        """Read and parse the document.

        Returns:
            The document's root table.

        Raises:
            DocumentError: If the document cannot be read or parsed.
        """
        ...


SUFFIX_FORMATS: Dict[str, str] = {
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}
