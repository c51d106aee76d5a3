"""
Service layer modules orchestrate Twitter workflows on top of the
lower-level client adapters.
"""

__all__ = [
    "twitter_service",
]
