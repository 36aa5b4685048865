"""Document source implementations.

This package contains the file-based sources (toml, yaml, json) and
a remote source that fetches documents over HTTP.
"""

__all__ = [
    "TomlFileSource",
    "YamlFileSource",
    "JsonFileSource",
    "HttpSource",
]
