
import os
import yaml
from typing import Any, Dict, Optional
from pydantic import SecretStr
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

AGENTS_API_PATH = "/api/agents/v1"


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    A settings source that loads configuration from 'config.yaml'.
    """
    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        # Not used directly, we override __call__
        return None, field_name, False

    def __call__(self) -> Dict[str, Any]:
        # Relative to the working directory unless AGENTLY_CONFIG_PATH says otherwise
        config_file = os.getenv("AGENTLY_CONFIG_PATH", "config.yaml")
        if not os.path.exists(config_file):
            return {}

        with open(config_file, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """
    Application Settings.

    Built once at process entry and handed to the components that need it;
    request handling never reads the environment directly.

    Priority:
    1. Constructor arguments
    2. Environment Variables (AGENTLY_...)
    3. config.yaml
    4. Defaults
    """
    model_config = SettingsConfigDict(
        env_prefix='AGENTLY_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        frozen=True,
    )

    # Server identity advertised during the MCP handshake
    server_name: str = "agently"
    server_version: str = "1.0.3"
    log_level: str = "INFO"

    # Agently API
    api_base_url: str = "https://agently.gg"
    api_key: Optional[SecretStr] = None

    # None keeps the httpx default
    http_timeout: Optional[float] = None

    @property
    def agents_endpoint(self) -> str:
        return f"{self.api_base_url.rstrip('/')}{AGENTS_API_PATH}"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )


def load_settings(**overrides: Any) -> Settings:
    """Reads the configuration once; call this at process entry only."""
    return Settings(**overrides)
