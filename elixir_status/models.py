"""
Pydantic models for postings and the Twitter API responses used by elixir_status.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from elixir_status.utils.text import permalink


def _to_mapping(payload: Any) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    if hasattr(payload, "data"):
        return _to_mapping(payload.data)
    if hasattr(payload, "__dict__"):
        return _to_mapping(vars(payload))
    raise TypeError(f"Cannot convert payload of type {type(payload)!r} to mapping.")


class Posting(BaseModel):
    """A user-authored status posting. Owned by the web application."""

    uid: str
    title: str | None = None
    text: str = ""
    permalink: str | None = None
    author_twitter_handle: str | None = None
    published_tweet_uid: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(cls, uid: str, title: str | None, text: str = "", **extra: Any) -> "Posting":
        """Build a posting whose permalink is derived from ``uid`` and ``title``."""
        return cls(uid=uid, title=title, text=text, permalink=permalink(uid, title), **extra)


class Tweet(BaseModel):
    """Normalized representation of a tweet."""

    id: str
    text: str | None = None

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_api(cls, payload: Any) -> "Tweet":
        return cls.model_validate(_to_mapping(payload))

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str:
        if isinstance(value, int):
            return str(value)
        return value


class DirectMessage(BaseModel):
    """Outcome of a direct message send call."""

    dm_event_id: str
    dm_conversation_id: str | None = None

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_api(cls, payload: Any) -> "DirectMessage":
        return cls.model_validate(_to_mapping(payload))


class TwitterUser(BaseModel):
    id: str
    username: str | None = None
    name: str | None = None

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_api(cls, payload: Any) -> "TwitterUser":
        return cls.model_validate(_to_mapping(payload))
