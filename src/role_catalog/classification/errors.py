"""Exceptions raised by the classification engine.

Both conditions are programming or configuration errors. They are raised
loudly and never recovered from, since a silently dropped role would leave a
hole in the list users see.
"""

from __future__ import annotations


class ClassificationError(Exception):
    """Base class for classification failures."""


class MisconfiguredCategorySet(ClassificationError):
    """The category sequence cannot place every name (no usable catch-all)."""


class InvalidInput(ClassificationError, TypeError):
    """The names handed to :func:`classify` are missing or not strings."""


__all__ = ["ClassificationError", "MisconfiguredCategorySet", "InvalidInput"]
