"""Text processing helpers.

Pure string functions used to build permalinks and the text of the
announcements posted to Twitter.
"""

from __future__ import annotations

import re

import markdown

DEFAULT_TITLE_LENGTH = 100
DEFAULT_DELIMITER = "..."

TWEET_LIMIT = 140
# Twitter counts every link as this many characters regardless of its length.
URL_LENGTH = 23
DEFAULT_MENTION = "/cc @elixirweekly"
DEFAULT_HASHTAG = "#elixirlang"

_WORD_SEPARATOR_RE = re.compile(r"(?:\s|%20)+")
_SLUG_FORBIDDEN_RE = re.compile(r"[^a-z0-9\-]")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")
_URL_RE = re.compile(r"https?://\S+")
_HREF_RE = re.compile(r'href="([^"]+?)"')


def short_title(
    title: str,
    max_length: int = DEFAULT_TITLE_LENGTH,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Shorten ``title`` to at most ``max_length`` characters.

    Whole words are kept as long as they fit in front of ``delimiter``; a
    first word that is longer than the room left is cut hard. A title that
    already fits is returned unchanged.

    >>> short_title("I really like this title", 15)
    'I really...'
    """
    if not isinstance(title, str):
        raise TypeError(f"title must be a str, not {type(title).__name__}")

    if len(title) <= max_length:
        return title
    if max_length <= 0:
        return ""

    budget = max_length - len(delimiter)
    if budget <= 0:
        return delimiter[:max_length]

    shortened = ""
    for word in title.split(" "):
        if not shortened:
            # leading blanks never start the shortened title
            shortened = word
            continue
        candidate = f"{shortened} {word}"
        if len(candidate) >= budget:
            break
        shortened = candidate

    return f"{shortened[:budget]}{delimiter}"


def permalink(uid: str, title: str | None) -> str | None:
    """Return a permalink made of the unmodified ``uid`` and a kebab-cased title.

    >>> permalink("aB87", "I really like this TiTlE")
    'aB87-i-really-like-this-title'
    """
    if title is None:
        return None

    slug = "-".join(_WORD_SEPARATOR_RE.split(title)).lower()
    slug = _SLUG_FORBIDDEN_RE.sub("", slug)
    slug = _HYPHEN_RUN_RE.sub("-", slug).strip("-")
    return f"{uid}-{slug}"


def weighted_length(text: str, *, url_length: int = URL_LENGTH) -> int:
    """Length of ``text`` as Twitter counts it."""
    return len(_URL_RE.sub("x" * url_length, text))


def compose_tweet(
    title: str,
    url: str,
    author_handle: str | None = None,
    *,
    mention: str = DEFAULT_MENTION,
    hashtag: str | None = DEFAULT_HASHTAG,
    limit: int = TWEET_LIMIT,
    url_length: int = URL_LENGTH,
) -> str:
    """Compose the tweet announcing a posting.

    The title is shortened so that title, author suffix, link and mention fit
    in ``limit``. ``hashtag`` is only appended while the tweet stays below
    ``limit``.
    """
    suffix = f" by @{author_handle}" if author_handle else ""
    tail = " ".join(part for part in (url, mention) if part)

    budget = limit - len(suffix) - 1 - url_length
    if mention:
        budget -= 1 + len(mention)

    text = f"{short_title(title, budget)}{suffix} {tail}"

    # Weighted rather than raw length: a short URL longer than url_length
    # still only costs url_length characters on Twitter.
    if hashtag and weighted_length(text, url_length=url_length) + 1 + len(hashtag) < limit:
        return f"{text} {hashtag}"
    return text


def extract_links(markdown_text: str | None) -> list[str]:
    """Return the link targets of a markdown document in document order."""
    html = markdown.markdown(markdown_text or "")
    return _HREF_RE.findall(html)
