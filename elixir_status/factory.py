"""
Factory for creating Twitter client and publisher instances.
"""

from __future__ import annotations

import tweepy

from elixir_status.clients.tweepy_client import TweepyClient
from elixir_status.config import ConfigManager, TwitterCredentials
from elixir_status.exceptions import ConfigurationError
from elixir_status.link_shortener import InMemoryLinkShortener, LinkShortener
from elixir_status.publisher import Publisher
from elixir_status.repository import InMemoryPostingRepository, PostingRepository
from elixir_status.services.twitter_service import TwitterService
from elixir_status.urls import SiteURL


class TwitterClientFactory:
    """Factory for creating properly initialized Twitter API clients."""

    @staticmethod
    def create_from_config(config_manager: ConfigManager) -> TweepyClient:
        """
        Create TweepyClient from the credentials known to ``config_manager``.

        Raises:
            ConfigurationError: If credentials are missing or invalid
        """
        credentials = config_manager.load_credentials()
        return TwitterClientFactory.create_from_credentials(credentials)

    @staticmethod
    def create_from_credentials(credentials: TwitterCredentials) -> TweepyClient:
        """
        Create TweepyClient directly from OAuth 1.0a credentials.

        Direct messages need user context, so the bearer token alone is
        not sufficient.

        Raises:
            ConfigurationError: If required credentials are missing
        """
        if not credentials.api_key or not credentials.api_secret:
            raise ConfigurationError("API key and secret are required")

        if not credentials.access_token or not credentials.access_token_secret:
            raise ConfigurationError("Access token and secret are required")

        client = tweepy.Client(
            bearer_token=credentials.bearer_token,
            consumer_key=credentials.api_key,
            consumer_secret=credentials.api_secret,
            access_token=credentials.access_token,
            access_token_secret=credentials.access_token_secret,
        )
        return TweepyClient(client)


def create_publisher(
    config_manager: ConfigManager,
    *,
    shortener: LinkShortener | None = None,
    repository: PostingRepository | None = None,
) -> Publisher:
    """
    Wire a Publisher from configuration.

    Outside production no Twitter client is built, so credentials are only
    required when the publisher actually talks to Twitter.
    """
    settings = config_manager.load_settings()
    client = (
        TwitterClientFactory.create_from_config(config_manager)
        if settings.is_production
        else None
    )
    return Publisher(
        twitter=TwitterService(client, environment=settings.environment),
        shortener=shortener if shortener is not None else InMemoryLinkShortener(),
        repository=repository if repository is not None else InMemoryPostingRepository(),
        site_url=SiteURL(settings.base_url),
        dm_recipient=settings.dm_recipient,
    )
