"""Client settings management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://slack.com/api"


class Settings(BaseSettings):
    """Slack client settings loaded from environment variables."""

    slack_token: str | None = Field(default=None, alias="SLACK_TOKEN")
    slack_api_base_url: str = Field(default=DEFAULT_API_BASE_URL, alias="SLACK_API_BASE_URL")
    slack_timeout: float | None = Field(default=None, alias="SLACK_TIMEOUT")

    # Only read by the live integration test.
    slack_channel_id: str | None = Field(default=None, alias="SLACK_CHANNEL_ID")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
