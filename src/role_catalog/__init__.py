"""Discord bot that lists self-assignable roles grouped by category."""

__version__ = "0.1.0"
