import logging
import os
from typing import List

logger = logging.getLogger(__name__)


def _split_ids(raw: str) -> List[int]:
    return [int(gid.strip()) for gid in raw.split(",") if gid.strip()]


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = (config or {}).get("rolecatalog", {})
        discord_cfg = cfg.get("discord", {})

        token_env = str(discord_cfg.get("token_env", "DISCORD_API_TOKEN"))
        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)

        # Empty means commands are synced globally instead of per guild
        guild_ids_cfg = discord_cfg.get("guild_ids")
        if guild_ids_cfg:
            self.GUILD_IDS: List[int] = [int(gid) for gid in guild_ids_cfg]
        else:
            self.GUILD_IDS = _split_ids(os.getenv("GUILD_IDS", ""))

        self.LOG_LEVEL: str = str(cfg.get("log_level", os.getenv("LOG_LEVEL", "INFO"))).upper()

        if not self.DISCORD_API_TOKEN:
            logger.warning("%s is not set; the bot will not be able to log in.", token_env)
