"""
Status updates and direct messages, gated by deployment environment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from elixir_status.config import DEFAULT_ENVIRONMENT, PRODUCTION_ENVIRONMENTS
from elixir_status.exceptions import ConfigurationError
from elixir_status.models import DirectMessage, Tweet, TwitterUser

logger = logging.getLogger(__name__)


class TwitterClient(Protocol):
    """Protocol subset consumed by the service."""

    def create_tweet(self, **kwargs: Any) -> Any:
        ...

    def create_direct_message(self, **kwargs: Any) -> Any:
        ...

    def get_user(self, **kwargs: Any) -> Any:
        ...


@dataclass(slots=True)
class TwitterService:
    """
    Posts to Twitter in production and only logs everywhere else.

    API errors are not handled here; they propagate to the caller.
    """

    client: TwitterClient | None = None
    environment: str = DEFAULT_ENVIRONMENT

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in PRODUCTION_ENVIRONMENTS

    def update_status(self, text: str) -> str | None:
        """Post ``text`` as a tweet and return the id of the new tweet."""
        if not self.is_production:
            logger.debug("update_twitter_status: %s", text)
            return None

        response = self._require_client().create_tweet(text=text)
        return Tweet.from_api(response).id

    def send_direct_message(self, recipient: str | None, text: str) -> str | None:
        """Send ``text`` to ``recipient`` (a user id or ``@handle``)."""
        if not self.is_production:
            logger.debug("send_direct_message: %s", text)
            return None

        if not recipient:
            raise ConfigurationError("A direct message recipient is required.")

        response = self._require_client().create_direct_message(
            participant_id=self._resolve_user_id(recipient),
            text=text,
        )
        return DirectMessage.from_api(response).dm_event_id

    def _resolve_user_id(self, recipient: str) -> str:
        if recipient.isdigit():
            return recipient

        response = self._require_client().get_user(username=recipient.lstrip("@"))
        return TwitterUser.from_api(response).id

    def _require_client(self) -> TwitterClient:
        if self.client is None:
            raise ConfigurationError("No Twitter client configured for production.")
        return self.client
