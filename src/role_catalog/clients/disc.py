"""Discord bot bootstrap utilities."""

from __future__ import annotations

import logging

import discord
from discord.ext import commands as discord_commands

from role_catalog import commands as rc_commands
from role_catalog.config import core
from role_catalog.event_hooks import ready_hook

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
# Slash commands and role fetches need no privileged intents
intents = discord.Intents.default()


class RoleCatalogBot(discord_commands.Bot):
    """Discord bot exposing the role listing slash commands."""

    def __init__(self) -> None:
        super().__init__(command_prefix=discord_commands.when_mentioned, intents=intents)

    async def setup_hook(self) -> None:
        """Register slash commands and synchronise with Discord."""

        await rc_commands.setup(self)

        try:
            if core.GUILD_IDS:
                for guild_id in core.GUILD_IDS:
                    guild = discord.Object(id=guild_id)
                    self.tree.copy_global_to(guild=guild)
                    synced = await self.tree.sync(guild=guild)
                    logger.info("Synced %d application command(s) to guild %s", len(synced), guild_id)
            else:
                synced = await self.tree.sync()
                logger.info("Synced %d application command(s)", len(synced))
        except discord.HTTPException:
            logger.exception("Failed to sync application commands")


bot = RoleCatalogBot()


@bot.event
async def on_ready() -> None:
    await ready_hook.handle(bot)


def run() -> None:
    """Start the Discord bot using configuration from the environment."""

    if not core.DISCORD_API_TOKEN:
        logger.error("No DISCORD_API_TOKEN configured. Cannot run client.")
        return

    try:
        bot.run(core.DISCORD_API_TOKEN, log_handler=None)
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
