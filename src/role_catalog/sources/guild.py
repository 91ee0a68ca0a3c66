from __future__ import annotations

import logging
from typing import List

import discord

from role_catalog.classification import Designation
from role_catalog.config import roles as roles_cfg

logger = logging.getLogger(__name__)


def _is_listable(role: discord.Role, include_managed: bool) -> bool:
    """Skip ``@everyone`` and, unless configured, integration-managed roles."""
    if role.is_default():
        return False
    if role.managed and not include_managed:
        return False
    return True


async def fetch_designations(
    guild: discord.Guild, *, include_managed: bool | None = None
) -> List[Designation]:
    """
    Fetch the guild's roles from Discord as :class:`Designation` records.

    Bypasses the role cache so newly created roles are listed. HTTP errors
    from discord.py propagate to the caller untouched.

    :param guild: Guild whose roles are listed.
    :param include_managed: Override for ``roles.INCLUDE_MANAGED``.
    :returns: One record per listable role, in Discord's order.
    """
    if include_managed is None:
        include_managed = roles_cfg.INCLUDE_MANAGED

    fetched = await guild.fetch_roles()
    designations = [
        Designation(name=role.name)
        for role in fetched
        if _is_listable(role, include_managed)
    ]

    logger.info(
        "Fetched %d role(s) for guild %s; %d listable",
        len(fetched),
        guild.id,
        len(designations),
    )
    return designations
