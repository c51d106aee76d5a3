"""
Posting persistence seam used by the publisher.
"""

from __future__ import annotations

from typing import Protocol

from elixir_status.models import Posting


class PostingRepository(Protocol):
    """Protocol subset of the web application's posting storage."""

    def update_published_tweet_uid(self, posting: Posting, tweet_uid: str | None) -> Posting:
        ...


class InMemoryPostingRepository:
    """Dictionary backed repository keyed by posting uid."""

    def __init__(self) -> None:
        self._postings: dict[str, Posting] = {}

    def add(self, posting: Posting) -> Posting:
        self._postings[posting.uid] = posting
        return posting

    def get(self, uid: str) -> Posting | None:
        return self._postings.get(uid)

    def update_published_tweet_uid(self, posting: Posting, tweet_uid: str | None) -> Posting:
        updated = posting.model_copy(update={"published_tweet_uid": tweet_uid})
        self._postings[updated.uid] = updated
        return updated
