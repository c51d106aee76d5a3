"""
Publisher for ElixirStatus postings.

Reacts to posting lifecycle events by shortening outbound links and
promoting new postings on Twitter.
"""

from elixir_status.publisher import Publisher
from elixir_status.utils.text import permalink, short_title

__all__ = [
    "Publisher",
    "permalink",
    "short_title",
]
