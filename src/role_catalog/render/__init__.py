"""Renderers turning classification results into Discord payloads."""

from .embed import render

__all__ = ["render"]
