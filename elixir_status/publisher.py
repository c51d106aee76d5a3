"""
The Publisher comes into play whenever a posting is created or updated.

It shortens the links of a posting, tells the site maintainers about new
postings and promotes them on Twitter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from elixir_status.link_shortener import LinkShortener
from elixir_status.models import Posting
from elixir_status.repository import PostingRepository
from elixir_status.services.twitter_service import TwitterService
from elixir_status.urls import SiteURL
from elixir_status.utils import text

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Publisher:
    """Reacts to posting lifecycle events."""

    twitter: TwitterService
    shortener: LinkShortener
    repository: PostingRepository
    site_url: SiteURL
    dm_recipient: str | None = None

    def after_create(
        self,
        posting: Posting,
        author_twitter_handle: str | None = None,
    ) -> Posting:
        """
        Called when a posting was created.

        Shortens its links, notifies the maintainers, tweets about it and
        records the id of that tweet on the posting.
        """
        self.create_all_short_links(posting)
        self.send_direct_message(posting)

        handle = author_twitter_handle or posting.author_twitter_handle
        tweet_uid = self.post_to_twitter(posting, handle)
        updated = self.repository.update_published_tweet_uid(posting, tweet_uid)
        logger.info("Recorded tweet %s for posting %s", tweet_uid, posting.uid)
        return updated

    def after_update(self, posting: Posting) -> Posting:
        """Called when a posting was updated."""
        return self.create_all_short_links(posting)

    @staticmethod
    def permalink(uid: str, title: str | None) -> str | None:
        return text.permalink(uid, title)

    def create_all_short_links(self, posting: Posting) -> Posting:
        links = text.extract_links(posting.text)
        for link in links:
            self.shortener.to_uid(link)
        logger.info("Shortened %d link(s) of posting %s", len(links), posting.uid)
        return posting

    def send_direct_message(self, posting: Posting) -> str | None:
        message = f"{text.short_title(posting.title or '')} {self.short_url(posting.permalink)}"
        return self.twitter.send_direct_message(self.dm_recipient, message)

    def post_to_twitter(
        self,
        posting: Posting,
        author_twitter_handle: str | None = None,
    ) -> str | None:
        return self.twitter.update_status(self.tweet_text(posting, author_twitter_handle))

    def tweet_text(self, posting: Posting, author_twitter_handle: str | None = None) -> str:
        """Returns the text of the tweet announcing ``posting``."""
        return text.compose_tweet(
            posting.title or "",
            self.short_url(posting.permalink),
            author_twitter_handle,
        )

    def short_url(self, permalink: str | None) -> str:
        """Short URL pointing at the page of the posting with ``permalink``."""
        uid = self.shortener.to_uid(self.site_url.from_path(f"/p/{permalink or ''}"))
        return self.site_url.from_path(f"/={uid}")
