"""
Slash command cogs for the role catalog bot.

Handler modules under ``commands/handlers`` are imported when this package
loads. Each marks its cog with :func:`register_cog`; :func:`setup` then adds
every marked cog to the bot once, keyed by cog class name.
"""

from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from pkgutil import iter_modules
from typing import Dict, List, Type

from discord.ext import commands as commands_ext

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, Type[commands_ext.Cog]] = {}


def register_cog(cog_cls: Type[commands_ext.Cog]) -> Type[commands_ext.Cog]:
    """Class decorator marking ``cog_cls`` for :func:`setup`."""
    if not (isinstance(cog_cls, type) and issubclass(cog_cls, commands_ext.Cog)):
        raise TypeError(f"register_cog expects a Cog subclass, got {cog_cls!r}")

    existing = _REGISTRY.get(cog_cls.__name__)
    if existing is not None and existing is not cog_cls:
        raise ValueError(f"A cog named {cog_cls.__name__!r} is already registered")

    _REGISTRY[cog_cls.__name__] = cog_cls
    return cog_cls


def registered_cogs() -> List[Type[commands_ext.Cog]]:
    return list(_REGISTRY.values())


async def setup(bot: commands_ext.Bot) -> List[str]:
    """
    Add every registered cog ``bot`` does not already have.

    Call from ``commands.Bot.setup_hook`` before syncing the command tree.

    :returns: Names of the cogs added by this call.
    """
    added: List[str] = []
    for name, cog_cls in _REGISTRY.items():
        if bot.get_cog(name) is None:
            await bot.add_cog(cog_cls(bot))
            added.append(name)

    if not _REGISTRY:
        logger.warning("No command cogs registered; /roles will not be available")
    else:
        logger.info("Added cog(s): %s", ", ".join(added) or "none (already loaded)")
    return added


def _import_handlers() -> None:
    handlers_dir = Path(__file__).resolve().parent / "handlers"
    for module in iter_modules([str(handlers_dir)]):
        if not module.name.startswith("_"):
            import_module(f"{__name__}.handlers.{module.name}")


_import_handlers()


__all__ = [
    "register_cog",
    "registered_cogs",
    "setup",
]
