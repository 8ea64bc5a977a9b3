"""Runtime configuration loaded from the environment."""

import os
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from .errors import ConfigError
from .providers import Provider

DEFAULT_REPO_URL = "https://github.com/Aperture-OS/testing-blink-repo.git"
DEFAULT_REPO_DIR = "./repo"
DEFAULT_REQUEST_DELAY = 0.8

ENV_FIELDS = {
    "WEBHOOK_URL": "webhook_url",
    "GITHUB_TOKEN": "github_token",
    "GITLAB_TOKEN": "gitlab_token",
    "CODEBERG_TOKEN": "codeberg_token",
    "REPO_URL": "repo_url",
    "REPO_DIR": "repo_dir",
    "REQUEST_DELAY": "request_delay",
    "NOTIFY_MENTION": "mention",
}


class Settings(BaseModel):
    """Immutable settings shared by the resolver, dispatcher and CLI."""

    model_config = ConfigDict(frozen=True)

    webhook_url: str | None = None
    github_token: str | None = None
    gitlab_token: str | None = None
    codeberg_token: str | None = None
    repo_url: str = DEFAULT_REPO_URL
    repo_dir: str = DEFAULT_REPO_DIR
    request_delay: float = DEFAULT_REQUEST_DELAY
    mention: str | None = None

    @field_validator(
        "webhook_url", "github_token", "gitlab_token", "codeberg_token", "mention",
        mode="before",
    )
    @classmethod
    def _blank_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("request_delay")
    @classmethod
    def _non_negative_delay(cls, value: float) -> float:
        if value < 0:
            raise ValueError("request_delay must not be negative")
        return value

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, env_file: str | None = ".env"
    ) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ
            env_file: Optional .env file loaded first when reading os.environ

        Returns:
            Frozen Settings instance
        """
        if environ is None:
            if env_file:
                load_dotenv(env_file, override=False)
            environ = os.environ

        values = {}
        for env_name, field_name in ENV_FIELDS.items():
            raw = environ.get(env_name)
            if raw is None or not raw.strip():
                continue
            values[field_name] = raw.strip()

        try:
            return cls(**values)
        except ValueError as e:
            raise ConfigError(f"Invalid configuration: {e}")

    def require_webhook(self) -> str:
        """Return the webhook URL or fail when it is not configured."""
        if not self.webhook_url:
            raise ConfigError("WEBHOOK_URL not set")
        return self.webhook_url

    def credential_for(self, provider: Provider) -> str | None:
        """Return the token configured for a provider, if any."""
        return {
            Provider.GITHUB: self.github_token,
            Provider.GITLAB: self.gitlab_token,
            Provider.CODEBERG: self.codeberg_token,
        }[provider]
