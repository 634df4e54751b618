from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import yaml

from juicebot.datatypes.discord_datatypes import ChannelID, GuildID, RoleID
from juicebot.util.logger import get_logger

logger = get_logger("app_configuration")


CONFIG_PATH = Path("./config/app_config.yml").resolve()

# Fixed identifiers of the Juiceworks community
JUICEWORKS_GUILD_ID = "1256628364987600977"
INTERNAL_CHANNEL_ID = "1256628365771669556"
JUICEWORKS_ROLE_ID = "1257752490372370503"
PROJECT_CREATOR_ROLE_ID = "1259262543034060830"
SERVICES_ROLE_ID = "1260738526425780264"


@dataclass(frozen=True, slots=True)
class GuildConfig:
    """The identifiers Juicebot is scoped to.

    Attributes:
        guild_id: The Juiceworks guild; commands are registered here only
        internal_channel_id: Shared internal channel where add-member is refused
        juiceworks_role_id: Community membership role required to use any command
        project_creator_role_id: Role granted to members added to a project channel
        services_role_id: Service-provider role; holders never get the project creator role
    """
    guild_id: GuildID = GuildID(JUICEWORKS_GUILD_ID)
    internal_channel_id: ChannelID = ChannelID(INTERNAL_CHANNEL_ID)
    juiceworks_role_id: RoleID = RoleID(JUICEWORKS_ROLE_ID)
    project_creator_role_id: RoleID = RoleID(PROJECT_CREATOR_ROLE_ID)
    services_role_id: RoleID = RoleID(SERVICES_ROLE_ID)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "GuildConfig":
        """Build a config from a mapping, keeping defaults for missing keys.

        Raises:
            ValueError: If a present identifier is not a valid snowflake.
        """
        defaults = cls()
        return cls(
            guild_id=GuildID(data.get("guild_id", defaults.guild_id)),
            internal_channel_id=ChannelID(data.get("internal_channel_id", defaults.internal_channel_id)),
            juiceworks_role_id=RoleID(data.get("juiceworks_role_id", defaults.juiceworks_role_id)),
            project_creator_role_id=RoleID(data.get("project_creator_role_id", defaults.project_creator_role_id)),
            services_role_id=RoleID(data.get("services_role_id", defaults.services_role_id)),
        )


class AppConfig:
    """Accessor around the optional YAML application configuration.

    The file is read once on construction. A missing file is not an error:
    every setting has a default, so a bare checkout runs against the
    Juiceworks guild with only a token configured.
    """

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self._data: Dict[str, Any] = {}
        self.reload()

    def load_from_disk(self) -> Dict[str, Any]:
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            logger.debug("[APP CONFIGURATION] No config file at %s; using defaults.", self.config_path)
            return {}
        except (OSError, yaml.YAMLError) as exc:
            logger.error("[APP CONFIGURATION] Failed to load config %s: %s", self.config_path, exc)
            return {}

        if not isinstance(data, dict):
            if data is not None:
                logger.error("[APP CONFIGURATION] Config %s is not a mapping; ignoring it.", self.config_path)
            return {}
        return data

    def reload(self) -> Dict[str, Any]:
        """Reload configuration from disk and return the loaded mapping."""
        self._data = self.load_from_disk()
        return self._data

    @property
    def guild(self) -> GuildConfig:
        """Return the Juiceworks identifiers, with overrides from the ``juiceworks`` section.

        Raises:
            ValueError: If an identifier in the file is malformed.
        """
        section = self._data.get("juiceworks", {})
        if not isinstance(section, dict):
            section = {}
        return GuildConfig.from_mapping(section)

    @property
    def log_level(self) -> str:
        """Return the configured log level name (default ``INFO``)."""
        section = self._data.get("logging", {})
        if isinstance(section, dict):
            return str(section.get("level", "INFO")).upper()
        return "INFO"


# Shared application-wide configuration instance
app_config = AppConfig(CONFIG_PATH)
