"""Mock responses for Twitter API integration tests."""

from __future__ import annotations

import re

TWEETS_ENDPOINT = re.compile(r"https://api\.(?:twitter|x)\.com/2/tweets$")
DM_ENDPOINT = re.compile(
    r"https://api\.(?:twitter|x)\.com/2/dm_conversations/with/(?P<participant>\d+)/messages$"
)
USER_BY_USERNAME_ENDPOINT = re.compile(
    r"https://api\.(?:twitter|x)\.com/2/users/by/username/maintainer(?:\?.*)?$"
)

# Twitter API v2 responses
TWEET_RESPONSE = {
    "data": {
        "id": "1234567890",
        "text": "I really like this TiTlE https://t.co/abc /cc @elixirweekly #elixirlang",
        "edit_history_tweet_ids": ["1234567890"],
    }
}

DM_RESPONSE = {
    "data": {
        "dm_conversation_id": "1346889436626259968-987",
        "dm_event_id": "1580705921830768647",
    }
}

USER_RESPONSE = {
    "data": {
        "id": "987",
        "name": "Site Maintainer",
        "username": "maintainer",
    }
}

DUPLICATE_TWEET_RESPONSE = {
    "detail": "You are not allowed to create a Tweet with duplicate content.",
    "type": "about:blank",
    "title": "Forbidden",
    "status": 403,
}

RATE_LIMIT_ERROR_RESPONSE = {
    "errors": [
        {
            "message": "Rate limit exceeded",
            "code": 88,
        }
    ]
}
