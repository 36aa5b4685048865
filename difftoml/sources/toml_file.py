"""TOML document source."""

from __future__ import annotations

from typing import Any, Dict

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - Python < 3.11
    import tomli as tomllib  # type: ignore[no-redef]

from ..core.errors import DocumentError
from .base import FileSource


def parse_toml(text: str, origin: str = "<string>") -> Dict[str, Any]:
    """Parse TOML text into a document tree.

    Raises:
        DocumentError: If the text is not valid TOML.
    """
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise DocumentError(f"Error parsing {origin} as TOML: {exc}") from exc


class TomlFileSource(FileSource):
    """Configuration document stored as a ``.toml`` file."""

    extension = ".toml"

    def parse(self, text: str) -> Any:
        return parse_toml(text, str(self.path))
