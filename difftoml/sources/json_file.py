"""JSON document source."""

from __future__ import annotations

import json
from typing import Any

from ..core.errors import DocumentError
from .base import FileSource


def parse_json(text: str, origin: str = "<string>") -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"Error parsing {origin} as JSON: {exc}") from exc


class JsonFileSource(FileSource):
    """Configuration document stored as a ``.json`` file."""

    extension = ".json"

    def parse(self, text: str) -> Any:
        return parse_json(text, str(self.path))
