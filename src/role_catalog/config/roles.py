import os

_DEFAULT_DESCRIPTION = (
    "The following categories list out the available roles that users can "
    "assign and remove themselves. These roles grant and remove your "
    "permission to view specific channels. If you would like access to all "
    "related channels, assign yourself the `Snooper` role."
)


def _as_bool(raw) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


class Roles:
    def __init__(self, config: dict | None = None) -> None:
        roles_cfg = (config or {}).get("rolecatalog", {}).get("roles", {})
        self.EMBED_TITLE: str = str(
            roles_cfg.get("embed_title", os.getenv("ROLES_EMBED_TITLE", "List of Assignable Roles"))
        )
        self.EMBED_DESCRIPTION: str = str(
            roles_cfg.get("embed_description", os.getenv("ROLES_EMBED_DESCRIPTION", _DEFAULT_DESCRIPTION))
        )
        self.EMPTY_PLACEHOLDER: str = str(
            roles_cfg.get("empty_placeholder", os.getenv("ROLES_EMPTY_PLACEHOLDER", "None"))
        )
        self.INCLUDE_MANAGED: bool = _as_bool(
            roles_cfg.get("include_managed", os.getenv("ROLES_INCLUDE_MANAGED", "false"))
        )
