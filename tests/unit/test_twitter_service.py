from __future__ import annotations

import logging

import pytest

from elixir_status.exceptions import ApiResponseError, ConfigurationError
from elixir_status.services.twitter_service import TwitterService


class FakeTwitterClient:
    def __init__(self) -> None:
        self.tweets: list[dict[str, object]] = []
        self.messages: list[dict[str, object]] = []
        self.user_lookups: list[dict[str, object]] = []
        self.create_response: dict[str, object] = {"id": "1500", "text": "hello"}
        self.dm_response: dict[str, object] = {"dm_event_id": "77", "dm_conversation_id": "1-2"}
        self.user_response: dict[str, object] = {"id": "321", "username": "maintainer"}
        self.error: Exception | None = None

    def create_tweet(self, **kwargs):
        if self.error:
            raise self.error
        self.tweets.append(kwargs)
        return self.create_response

    def create_direct_message(self, **kwargs):
        if self.error:
            raise self.error
        self.messages.append(kwargs)
        return self.dm_response

    def get_user(self, **kwargs):
        self.user_lookups.append(kwargs)
        return self.user_response


def test_update_status_posts_in_production() -> None:
    client = FakeTwitterClient()
    service = TwitterService(client, environment="prod")

    tweet_uid = service.update_status("hello")

    assert tweet_uid == "1500"
    assert client.tweets == [{"text": "hello"}]


def test_update_status_only_logs_outside_production(caplog) -> None:
    client = FakeTwitterClient()
    service = TwitterService(client, environment="dev")

    with caplog.at_level(logging.DEBUG, logger="elixir_status.services.twitter_service"):
        tweet_uid = service.update_status("hello")

    assert tweet_uid is None
    assert client.tweets == []
    assert "update_twitter_status: hello" in caplog.text


def test_send_direct_message_only_logs_outside_production(caplog) -> None:
    service = TwitterService(None, environment="test")

    with caplog.at_level(logging.DEBUG, logger="elixir_status.services.twitter_service"):
        result = service.send_direct_message(None, "new posting")

    assert result is None
    assert "send_direct_message: new posting" in caplog.text


def test_send_direct_message_to_user_id() -> None:
    client = FakeTwitterClient()
    service = TwitterService(client, environment="production")

    event_id = service.send_direct_message("987", "new posting")

    assert event_id == "77"
    assert client.user_lookups == []
    assert client.messages == [{"participant_id": "987", "text": "new posting"}]


def test_send_direct_message_resolves_handle() -> None:
    client = FakeTwitterClient()
    service = TwitterService(client, environment="prod")

    service.send_direct_message("@maintainer", "new posting")

    assert client.user_lookups == [{"username": "maintainer"}]
    assert client.messages[0]["participant_id"] == "321"


def test_send_direct_message_requires_recipient_in_production() -> None:
    service = TwitterService(FakeTwitterClient(), environment="prod")

    with pytest.raises(ConfigurationError):
        service.send_direct_message(None, "new posting")


def test_production_requires_client() -> None:
    service = TwitterService(None, environment="prod")

    with pytest.raises(ConfigurationError):
        service.update_status("hello")


def test_api_errors_propagate() -> None:
    client = FakeTwitterClient()
    client.error = ApiResponseError("duplicate content", code=187)
    service = TwitterService(client, environment="prod")

    with pytest.raises(ApiResponseError):
        service.update_status("hello")
