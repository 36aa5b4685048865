from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Any, Callable, Dict, Optional

import httpx

from ..core.errors import DocumentError
from ..core.source import SUFFIX_FORMATS, Source
from .base import ensure_table
from .json_file import parse_json
from .toml_file import parse_toml
from .yaml_file import parse_yaml

logger = logging.getLogger(__name__)

_PARSERS: Dict[str, Callable[[str, str], Any]] = {
    "toml": parse_toml,
    "yaml": parse_yaml,
    "json": parse_json,
}


class HttpSource(Source):
    """Configuration document fetched over HTTP(S).

    URI format: http(s)://host/path/config.toml
    The document format is taken from the suffix of the URL path.
    """

    def __init__(
        self,
        uri: str,
        name: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.uri = uri
        self.url = httpx.URL(uri)
        if self.url.scheme not in ("http", "https"):
            raise DocumentError(f"HttpSource requires an http:// or https:// URI: {uri}")
        self.extension = PurePosixPath(self.url.path).suffix.lower()
        if self.extension not in SUFFIX_FORMATS:
            raise DocumentError(f"Unsupported document type: {uri}")
        self.name = name or uri
        self.id = uri
        self._client = client or httpx.Client(
            headers={"Accept": "text/plain, application/json, */*"},
            follow_redirects=True,
            timeout=20.0,
        )

    def fetch(self) -> str:
        try:
            resp = self._client.get(self.url)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise DocumentError(f"Error fetching {self.uri}: {exc}") from exc
        return resp.text

    def load(self) -> Dict[str, Any]:
        parser = _PARSERS[SUFFIX_FORMATS[self.extension]]
        data = ensure_table(parser(self.fetch(), self.uri), self.uri)
        logger.debug("Fetched %d top-level keys from %s", len(data), self.uri)
        return data
