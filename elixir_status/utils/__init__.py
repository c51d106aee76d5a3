"""Utility helpers for the elixir_status package."""

from __future__ import annotations

__all__ = [
    "compose_tweet",
    "extract_links",
    "permalink",
    "short_title",
    "weighted_length",
]

from .text import compose_tweet, extract_links, permalink, short_title, weighted_length
