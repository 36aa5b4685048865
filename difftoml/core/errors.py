"""Exceptions raised by difftoml."""

from __future__ import annotations


class DiffTomlError(Exception):
    """Base class for all difftoml errors."""


class AsymmetricComparison(DiffTomlError):
    """The two views of the key intersection disagree.

    Only a broken equality or hash implementation on the compared
    elements can trigger this.
    """


class DocumentError(DiffTomlError, ValueError):
    """A document could not be located, read or parsed."""
