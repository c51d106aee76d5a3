#!/usr/bin/env python
"""
Example: Run the publisher for a new posting.

This example demonstrates:
- Loading settings and credentials from environment, .env or file
- Wiring a Publisher using the factory
- Running the "after create" hook for a posting

Outside production (ELIXIR_STATUS_ENV != prod) nothing is sent to Twitter;
the tweet and the direct message are logged instead.

Usage:
    python examples/publish_posting.py "I really like this title" --text "See [docs](https://hexdocs.pm)"

    python examples/publish_posting.py "Announcing v1.0" --author elixirlang --uid aB87

Requirements (production only):
    - TWITTER_API_KEY
    - TWITTER_API_SECRET
    - TWITTER_ACCESS_TOKEN
    - TWITTER_ACCESS_TOKEN_SECRET
    - ELIXIR_STATUS_TWITTER_DM_RECIPIENT
"""

from __future__ import annotations

import argparse
import logging
import secrets
import sys
from pathlib import Path

from elixir_status.config import ConfigManager
from elixir_status.exceptions import ConfigurationError, ElixirStatusError
from elixir_status.factory import create_publisher
from elixir_status.models import Posting


def main() -> int:
    """Main entry point for the example."""
    parser = argparse.ArgumentParser(description="Publish a posting")
    parser.add_argument("title", help="Posting title")
    parser.add_argument("--text", default="", help="Markdown body of the posting")
    parser.add_argument("--uid", help="Posting uid (random when omitted)")
    parser.add_argument("--author", help="Twitter handle of the author, without @")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to credentials JSON file (default: credentials/twitter_config.json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        publisher = create_publisher(ConfigManager(credential_path=args.config))

        posting = Posting.create(args.uid or secrets.token_urlsafe(3), args.title, args.text)
        print(f"Permalink: {posting.permalink}")
        print(f"Tweet: {publisher.tweet_text(posting, args.author)}")

        published = publisher.after_create(posting, args.author)
        if published.published_tweet_uid:
            print(f"Tweet URL: https://twitter.com/i/web/status/{published.published_tweet_uid}")
        else:
            print("Not in production; nothing was sent to Twitter.")
        return 0

    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 1

    except ElixirStatusError as e:
        print(f"Twitter API error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
