import discord

import logging

logger = logging.getLogger(__name__)


async def handle(client: discord.Client):
    """Log the connected identity and the guilds the bot can list roles for."""
    logger.info(f"Logged in as {client.user.name} (ID: {client.user.id})")

    guilds = list(client.guilds)
    logger.info(f"Serving {len(guilds)} guild(s): {[g.id for g in guilds]}")
