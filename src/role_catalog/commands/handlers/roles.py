from __future__ import annotations

import logging
from typing import Awaitable, Callable, Iterable, Sequence

import discord
from discord import app_commands
from discord.ext import commands

from .. import register_cog
from ...classification import (
    CategorySet,
    ClassificationResult,
    DEFAULT_CATEGORIES,
    Designation,
    classify_designations,
)
from ...render import render
from ...sources import fetch_designations

logger = logging.getLogger(__name__)

GUILD_ONLY_MESSAGE = "Roles can only be listed inside a server."
FETCH_FAILED_MESSAGE = "Could not fetch this server's roles. Please try again later."

Fetcher = Callable[[discord.Guild], Awaitable[Iterable[Designation]]]
Renderer = Callable[[ClassificationResult], Sequence[discord.Embed]]


async def list_roles(
    interaction: discord.Interaction,
    *,
    fetch: Fetcher = fetch_designations,
    categories: CategorySet = DEFAULT_CATEGORIES,
    renderer: Renderer = render,
) -> None:
    """
    Fetch, classify and post the caller's guild roles.

    :param interaction: Slash command interaction.
    :param fetch: Source of the guild's designations.
    :param categories: Categories to group roles into.
    :param renderer: Turns the grouped roles into embeds, one per message.
    """
    guild = interaction.guild
    if guild is None:
        await interaction.response.send_message(GUILD_ONLY_MESSAGE, ephemeral=True)
        return

    await interaction.response.defer(thinking=True)

    try:
        designations = await fetch(guild)
    except discord.HTTPException:
        logger.exception("Failed to fetch roles for guild %s", guild.id)
        # The deferred reply is public; replace its "thinking" state with the apology
        await interaction.edit_original_response(content=FETCH_FAILED_MESSAGE)
        return

    result = classify_designations(designations, categories)
    embeds = renderer(result)

    logger.info(
        "Listing %d role group(s) in %d embed(s) for %s in guild %s",
        len(result),
        len(embeds),
        interaction.user,
        guild.id,
    )
    first, *rest = embeds
    await interaction.followup.send(content=f"{interaction.user.mention},", embed=first)
    for embed in rest:
        await interaction.followup.send(embed=embed)


@register_cog
class Roles(commands.Cog):
    """List the roles users can assign themselves."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(
        name="roles",
        description="Lists out the available roles that users can assign themselves.",
    )
    @app_commands.guild_only()
    async def roles(self, interaction: discord.Interaction) -> None:
        """Reply with the server's self-assignable roles grouped by category."""

        await list_roles(interaction)
