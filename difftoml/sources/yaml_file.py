"""YAML document source."""

from __future__ import annotations

from typing import Any

import yaml

from ..core.errors import DocumentError
from .base import FileSource


def parse_yaml(text: str, origin: str = "<string>") -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentError(f"Error parsing {origin} as YAML: {exc}") from exc


class YamlFileSource(FileSource):
    """Configuration document stored as a ``.yaml``/``.yml`` file."""

    extension = ".yaml"

    def parse(self, text: str) -> Any:
        return parse_yaml(text, str(self.path))
