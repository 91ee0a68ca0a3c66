from types import SimpleNamespace
from unittest.mock import AsyncMock

import discord
import pytest

from role_catalog.classification import Designation
from role_catalog.config import roles as roles_cfg
from role_catalog.sources import fetch_designations


def _role(name, *, default=False, managed=False):
    return SimpleNamespace(name=name, managed=managed, is_default=lambda: default)


def _guild(roles):
    return SimpleNamespace(id=99, fetch_roles=AsyncMock(return_value=roles))


@pytest.mark.asyncio
async def test_fetch_designations_skips_everyone_and_managed(monkeypatch):
    monkeypatch.setattr(roles_cfg, "INCLUDE_MANAGED", False)
    guild = _guild(
        [
            _role("@everyone", default=True),
            _role("CS 121"),
            _role("MEE6", managed=True),
            _role("she/her"),
        ]
    )

    designations = await fetch_designations(guild)

    assert designations == [Designation("CS 121"), Designation("she/her")]
    guild.fetch_roles.assert_awaited_once()


@pytest.mark.asyncio
async def test_fetch_designations_can_include_managed_roles():
    guild = _guild([_role("MEE6", managed=True), _role("Snooper")])

    designations = await fetch_designations(guild, include_managed=True)

    assert [d.name for d in designations] == ["MEE6", "Snooper"]


@pytest.mark.asyncio
async def test_fetch_designations_propagates_http_errors():
    response = SimpleNamespace(status=403, reason="Forbidden")
    guild = SimpleNamespace(
        id=99, fetch_roles=AsyncMock(side_effect=discord.Forbidden(response, "Missing Access"))
    )

    with pytest.raises(discord.Forbidden):
        await fetch_designations(guild)
