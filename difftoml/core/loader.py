"""Locate and load configuration documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import DocumentError
from .source import SUFFIX_FORMATS, Source
# Lazy imports inside open_source keep optional source dependencies off the import path

logger = logging.getLogger(__name__)


def open_source(path_or_uri: Union[str, Path], name: Optional[str] = None) -> Source:
    """Create a source instance based on URI scheme or file suffix.

    Args:
        path_or_uri: File path or http(s) URL of the document.
        name: Optional custom name for the source.

    Returns:
        Source instance.

    Raises:
        DocumentError: If the path does not exist or its type is not supported.
    """
    s = str(path_or_uri)
    if s.startswith(("http://", "https://")):
        from ..sources.http_source import HttpSource
        return HttpSource(s, name=name)
    p = Path(s)
    if not p.exists():
        raise DocumentError(f"Path does not exist: {p}")
    if not p.is_file():
        raise DocumentError(f"Path is not a file: {p}")
    fmt = SUFFIX_FORMATS.get(p.suffix.lower())
    if fmt == "toml":
        from ..sources.toml_file import TomlFileSource
        return TomlFileSource(p, name=name)
    if fmt == "yaml":
        from ..sources.yaml_file import YamlFileSource
        return YamlFileSource(p, name=name)
    if fmt == "json":
        from ..sources.json_file import JsonFileSource
        return JsonFileSource(p, name=name)
    raise DocumentError(f"Unsupported document type: {p}")


def load_document(path_or_uri: Union[str, Path]) -> Dict[str, Any]:
    """Open and parse one document.

    Args:
        path_or_uri: File path or http(s) URL of the document.

    Returns:
        The document's root table.
    """
    source = open_source(path_or_uri)
    logger.debug("Loading %s with %s", source.name, type(source).__name__)
    return source.load()
