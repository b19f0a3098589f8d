"""Configuration system using pydantic-settings with environment variable loading."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .transport import DEFAULT_TIMEOUT

DATA_BASE_URL = "https://data.alpaca.markets"


class ApiSettings(BaseSettings):
    """Credentials and endpoints, read from ``APCA_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(env_prefix="APCA_", env_file=".env", extra="ignore")

    api_key_id: SecretStr = SecretStr("")
    api_secret_key: SecretStr = SecretStr("")
    api_data_url: str = DATA_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT


@dataclass(frozen=True, slots=True)
class ApiInfo:
    """Everything needed to authenticate a request."""

    base_url: str
    key_id: str
    secret: str

    def __repr__(self) -> str:
        return f"ApiInfo(base_url={self.base_url!r}, key_id={self.key_id!r}, secret='**********')"

    @classmethod
    def from_settings(cls, settings: ApiSettings) -> ApiInfo:
        key_id = settings.api_key_id.get_secret_value()
        secret = settings.api_secret_key.get_secret_value()
        if not key_id or not secret:
            raise ConfigurationError("API credentials not found. Set APCA_API_KEY_ID and APCA_API_SECRET_KEY.")
        return cls(base_url=settings.api_data_url, key_id=key_id, secret=secret)

    @classmethod
    def from_env(cls) -> ApiInfo:
        """Load credentials from the environment."""

        return cls.from_settings(ApiSettings())
