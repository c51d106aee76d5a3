"""
Short link storage keyed by destination URL.
"""

from __future__ import annotations

import logging
import string
from typing import Protocol

logger = logging.getLogger(__name__)

BASE62_ALPHABET = string.digits + string.ascii_letters


class LinkShortener(Protocol):
    """Protocol for services handing out short uids for URLs."""

    def to_uid(self, url: str) -> str:
        ...


def encode_base62(number: int) -> str:
    if number < 0:
        raise ValueError("number must not be negative")
    if number == 0:
        return BASE62_ALPHABET[0]

    digits: list[str] = []
    while number:
        number, remainder = divmod(number, len(BASE62_ALPHABET))
        digits.append(BASE62_ALPHABET[remainder])
    return "".join(reversed(digits))


class InMemoryLinkShortener:
    """Process local shortener. The same URL always maps to the same uid."""

    def __init__(self, *, offset: int = 1) -> None:
        self._offset = offset
        self._uids: dict[str, str] = {}
        self._urls: dict[str, str] = {}

    def to_uid(self, url: str) -> str:
        if not url:
            raise ValueError("url must not be empty")

        uid = self._uids.get(url)
        if uid is None:
            uid = encode_base62(self._offset + len(self._uids))
            self._uids[url] = uid
            self._urls[uid] = url
            logger.debug("Shortened %s to %s", url, uid)
        return uid

    def resolve(self, uid: str) -> str | None:
        return self._urls.get(uid)

    def __len__(self) -> int:
        return len(self._uids)
