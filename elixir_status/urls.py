"""
Canonical URL construction for the site.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SiteURL:
    """Builds absolute URLs below ``base_url``."""

    base_url: str

    def from_path(self, path: str) -> str:
        """
        Return the absolute URL for ``path``.

            SiteURL("https://elixirstatus.com").from_path("/p/aB87-hello")
            # => "https://elixirstatus.com/p/aB87-hello"
        """
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url.rstrip('/')}{path}"
