"""Designation sources."""

from .guild import fetch_designations

__all__ = ["fetch_designations"]
