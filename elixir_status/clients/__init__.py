"""Client adapters wrapping third-party Twitter libraries."""

__all__ = [
    "tweepy_client",
]
