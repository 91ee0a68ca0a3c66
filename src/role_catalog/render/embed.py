"""
Build ``discord.Embed`` pages from a :class:`ClassificationResult`.

Each category becomes one full-width field whose value is the comma-joined
member list. Discord rejects empty field values and caps each value at
1024 characters, so empty groups show a placeholder and long groups spill
into ``"<label> (cont.)"`` fields, split between members. Fields that would
break the 25-field or 6000-character embed limits move to a follow-up embed.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import discord

from role_catalog.classification import ClassificationResult
from role_catalog.config import roles as roles_cfg

logger = logging.getLogger(__name__)

FIELD_VALUE_LIMIT = 1024
MAX_FIELDS = 25
EMBED_TOTAL_LIMIT = 6000
SEPARATOR = ", "


def _chunk_members(members: Sequence[str], limit: int = FIELD_VALUE_LIMIT) -> List[str]:
    """Join ``members`` into strings no longer than ``limit``."""
    chunks: List[str] = []
    current = ""
    for member in members:
        candidate = f"{current}{SEPARATOR}{member}" if current else member
        if current and len(candidate) > limit:
            chunks.append(current)
            current = member
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


def build_fields(
    result: ClassificationResult, *, placeholder: str | None = None
) -> List[Tuple[str, str]]:
    """
    Lay out ``result`` as ``(name, value)`` embed fields.

    :param result: Grouped role names.
    :param placeholder: Value for empty groups; defaults to config.
    :returns: Fields in category order.
    """
    if placeholder is None:
        placeholder = roles_cfg.EMPTY_PLACEHOLDER

    fields: List[Tuple[str, str]] = []
    for group in result:
        chunks = _chunk_members(group.members) or [placeholder]
        fields.append((group.label, chunks[0]))
        fields.extend((f"{group.label} (cont.)", chunk) for chunk in chunks[1:])
    return fields


def render(
    result: ClassificationResult,
    *,
    title: str | None = None,
    description: str | None = None,
    placeholder: str | None = None,
) -> List[discord.Embed]:
    """
    Render grouped roles as one or more embeds.

    A new embed starts whenever the next field would push the current one
    past :data:`MAX_FIELDS` fields or :data:`EMBED_TOTAL_LIMIT` characters.
    Only the first embed carries the description; later ones are titled
    ``"<title> (cont.)"``. Send each embed in its own message, since the
    character limit applies to a message's embeds combined.

    :param result: Output of :func:`~role_catalog.classification.classify`.
    :param title: Embed title; defaults to ``roles.EMBED_TITLE``.
    :param description: Embed description; defaults to ``roles.EMBED_DESCRIPTION``.
    :param placeholder: Value shown for empty categories.
    :returns: Embeds ready to send, in order.
    """
    title = title if title is not None else roles_cfg.EMBED_TITLE
    description = description if description is not None else roles_cfg.EMBED_DESCRIPTION

    pages = [discord.Embed(title=title, description=description)]
    for name, value in build_fields(result, placeholder=placeholder):
        page = pages[-1]
        too_many = len(page.fields) >= MAX_FIELDS
        too_long = len(page) + len(name) + len(value) > EMBED_TOTAL_LIMIT
        if page.fields and (too_many or too_long):
            page = discord.Embed(title=f"{title} (cont.)")
            pages.append(page)
        page.add_field(name=name, value=value, inline=False)

    if len(pages) > 1:
        logger.info("Role listing split across %d embeds", len(pages))
    return pages


__all__ = ["render", "build_fields", "FIELD_VALUE_LIMIT", "MAX_FIELDS", "EMBED_TOTAL_LIMIT"]
