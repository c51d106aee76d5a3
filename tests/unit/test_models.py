from __future__ import annotations

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from elixir_status.models import DirectMessage, Posting, Tweet, TwitterUser
from elixir_status.repository import InMemoryPostingRepository


def test_posting_create_derives_permalink() -> None:
    posting = Posting.create("aB87", "I really like this TiTlE", "body")

    assert posting.permalink == "aB87-i-really-like-this-title"
    assert posting.text == "body"


def test_posting_without_title_has_no_permalink() -> None:
    assert Posting.create("aB87", None).permalink is None


def test_posting_is_immutable() -> None:
    posting = Posting.create("aB87", "Title")

    with pytest.raises(ValidationError):
        posting.title = "Other"  # type: ignore[misc]


def test_tweet_from_tweepy_response() -> None:
    response = SimpleNamespace(data={"id": "1445880548472328192", "text": "hi"}, includes={})

    tweet = Tweet.from_api(response)

    assert tweet.id == "1445880548472328192"
    assert tweet.text == "hi"


def test_tweet_coerces_integer_ids() -> None:
    assert Tweet.from_api({"id": 42}).id == "42"


def test_direct_message_from_mapping() -> None:
    message = DirectMessage.from_api({"dm_event_id": "5", "dm_conversation_id": "1-2"})

    assert message.dm_event_id == "5"


def test_user_from_nested_payload() -> None:
    user_object = SimpleNamespace(data={"id": "12", "username": "maintainer"})

    user = TwitterUser.from_api(SimpleNamespace(data=user_object))

    assert user.id == "12"


def test_from_api_rejects_unconvertible_payload() -> None:
    with pytest.raises(TypeError):
        Tweet.from_api(42)


def test_repository_records_tweet_uid() -> None:
    repository = InMemoryPostingRepository()
    posting = repository.add(Posting.create("aB87", "Title"))

    updated = repository.update_published_tweet_uid(posting, "1500")

    assert updated.published_tweet_uid == "1500"
    assert repository.get("aB87") == updated
    assert posting.published_tweet_uid is None
