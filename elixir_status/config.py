"""
Configuration management utilities for elixir_status.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Mapping, Sequence

from dotenv import dotenv_values

from elixir_status.exceptions import ConfigurationError

ENV_VAR_MAP = {
    "api_key": "TWITTER_API_KEY",
    "api_secret": "TWITTER_API_SECRET",
    "access_token": "TWITTER_ACCESS_TOKEN",
    "access_token_secret": "TWITTER_ACCESS_TOKEN_SECRET",
    "bearer_token": "TWITTER_BEARER_TOKEN",
}

SETTINGS_ENV_VAR_MAP = {
    "environment": "ELIXIR_STATUS_ENV",
    "base_url": "ELIXIR_STATUS_BASE_URL",
    "dm_recipient": "ELIXIR_STATUS_TWITTER_DM_RECIPIENT",
}

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_BASE_URL = "https://elixirstatus.com"
PRODUCTION_ENVIRONMENTS = frozenset({"prod", "production"})


@dataclass(slots=True)
class TwitterCredentials:
    """Credential container supporting OAuth 1.0a and OAuth 2.0 tokens."""

    api_key: str | None = None
    api_secret: str | None = None
    access_token: str | None = None
    access_token_secret: str | None = None
    bearer_token: str | None = None

    def is_empty(self) -> bool:
        return all(value in (None, "") for value in asdict(self).values())

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> "TwitterCredentials":
        return cls(
            api_key=data.get("api_key"),
            api_secret=data.get("api_secret"),
            access_token=data.get("access_token"),
            access_token_secret=data.get("access_token_secret"),
            bearer_token=data.get("bearer_token"),
        )


@dataclass(slots=True)
class PublisherSettings:
    """Runtime settings for the publisher."""

    environment: str = DEFAULT_ENVIRONMENT
    base_url: str = DEFAULT_BASE_URL
    dm_recipient: str | None = None

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in PRODUCTION_ENVIRONMENTS

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> "PublisherSettings":
        return cls(
            environment=data.get(SETTINGS_ENV_VAR_MAP["environment"]) or DEFAULT_ENVIRONMENT,
            base_url=data.get(SETTINGS_ENV_VAR_MAP["base_url"]) or DEFAULT_BASE_URL,
            dm_recipient=data.get(SETTINGS_ENV_VAR_MAP["dm_recipient"]) or None,
        )


class ConfigManager:
    """Loads credentials and settings from environment variables, .env or disk."""

    def __init__(
        self,
        credential_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
        dotenv_path: Path | None = None,
    ) -> None:
        self._credential_path = credential_path or Path("credentials/twitter_config.json")
        self._env = env if env is not None else os.environ
        self._dotenv_path = dotenv_path or Path(".env")

    def load_credentials(
        self,
        priority: Sequence[str] = ("env", "dotenv", "file"),
    ) -> TwitterCredentials:
        """
        Load credentials according to the requested priority order.

        Raises:
            ConfigurationError: when no credentials are available.
        """

        for source in priority:
            if source == "env":
                credentials = self._load_from_env()
            elif source == "dotenv":
                credentials = self._load_from_dotenv()
            elif source == "file":
                credentials = self._load_from_file()
            else:
                raise ValueError(f"Unknown credential source '{source}'.")

            if credentials and not credentials.is_empty():
                return credentials

        raise ConfigurationError("Twitter credentials are not configured.")

    def load_settings(self) -> PublisherSettings:
        """
        Build publisher settings, environment variables winning over ``.env``.

        Raises:
            ConfigurationError: when production is selected without a DM recipient.
        """

        values: dict[str, str | None] = dict(self._read_dotenv())
        values.update(
            {
                name: self._env[name]
                for name in SETTINGS_ENV_VAR_MAP.values()
                if self._env.get(name)
            }
        )
        settings = PublisherSettings.from_mapping(values)
        if settings.is_production and not settings.dm_recipient:
            raise ConfigurationError(
                f"{SETTINGS_ENV_VAR_MAP['dm_recipient']} is required in production."
            )
        return settings

    def _load_from_env(self) -> TwitterCredentials | None:
        return self._credentials_from_variables(self._env)

    def _load_from_dotenv(self) -> TwitterCredentials | None:
        return self._credentials_from_variables(self._read_dotenv())

    def _read_dotenv(self) -> dict[str, str | None]:
        if not self._dotenv_path.exists():
            return {}
        return dict(dotenv_values(self._dotenv_path))

    @staticmethod
    def _credentials_from_variables(
        variables: Mapping[str, str | None],
    ) -> TwitterCredentials | None:
        values: dict[str, str | None] = {
            field: variables.get(env_name) for field, env_name in ENV_VAR_MAP.items()
        }
        credentials = TwitterCredentials.from_mapping(values)
        return credentials if not credentials.is_empty() else None

    def _load_from_file(self) -> TwitterCredentials | None:
        if not self._credential_path.exists():
            return None

        with self._credential_path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)

        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Credential file {self._credential_path} did not contain a mapping."
            )

        credentials = TwitterCredentials.from_mapping(data)
        return credentials if not credentials.is_empty() else None
