from role_catalog.config.core import Core
from role_catalog.config.loader import load_raw_config
from role_catalog.config.roles import Roles


def test_load_raw_config_missing_file_returns_empty(tmp_path):
    assert load_raw_config(tmp_path / "absent.toml") == {}


def test_load_raw_config_reads_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[rolecatalog.roles]\nembed_title = "Roles!"\n', encoding="utf-8")

    assert load_raw_config(path) == {"rolecatalog": {"roles": {"embed_title": "Roles!"}}}


def test_core_prefers_toml_guild_ids(monkeypatch):
    monkeypatch.setenv("GUILD_IDS", "1,2")

    core = Core({"rolecatalog": {"discord": {"guild_ids": [5]}}})

    assert core.GUILD_IDS == [5]


def test_core_reads_env_guild_ids(monkeypatch):
    monkeypatch.setenv("GUILD_IDS", " 10, 20 ,")

    assert Core().GUILD_IDS == [10, 20]


def test_core_reads_token_from_configured_env(monkeypatch):
    monkeypatch.setenv("ROLE_BOT_TOKEN", "abc")

    core = Core({"rolecatalog": {"discord": {"token_env": "ROLE_BOT_TOKEN"}}})

    assert core.DISCORD_API_TOKEN == "abc"


def test_roles_defaults(monkeypatch):
    for var in ("ROLES_EMBED_TITLE", "ROLES_EMPTY_PLACEHOLDER", "ROLES_INCLUDE_MANAGED"):
        monkeypatch.delenv(var, raising=False)

    roles = Roles()

    assert roles.EMBED_TITLE == "List of Assignable Roles"
    assert roles.EMPTY_PLACEHOLDER == "None"
    assert roles.INCLUDE_MANAGED is False
    assert "Snooper" in roles.EMBED_DESCRIPTION


def test_roles_include_managed_from_env(monkeypatch):
    monkeypatch.setenv("ROLES_INCLUDE_MANAGED", "yes")

    assert Roles().INCLUDE_MANAGED is True
