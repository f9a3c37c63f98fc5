from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore", env_file=[Path(".env.test"), Path(".env")], env_file_encoding="utf-8"
    )

    ga_tracking_id: str = Field(...)
    report_email: str | None = Field(default=None)

    smtp_host: str = "localhost"
    smtp_port: int = 25
    smtp_sender: str = "ga-tracker@localhost"

    slack_token: str | None = Field(default=None)
    slack_channel: str | None = Field(default=None)

    sentry_dsn: str | None = Field(default=None)

    request_timeout: int = 10
