from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

X_BASE_URL = "https://x.com"


def _q(value: Any) -> str:
    return quote(str(value), safe="")


def get_tweet_url(screen_name: str, tweet_id: str) -> str:
    return f"{X_BASE_URL}/{screen_name}/status/{tweet_id}"


def get_user_url(screen_name: str) -> str:
    return f"{X_BASE_URL}/{screen_name}"


def get_follow_url(screen_name: str) -> str:
    return f"{X_BASE_URL}/intent/follow?screen_name={_q(screen_name)}"


def get_like_url(tweet_id: str) -> str:
    return f"{X_BASE_URL}/intent/like?tweet_id={_q(tweet_id)}"


def get_reply_url(tweet_id: str) -> str:
    return f"{X_BASE_URL}/intent/tweet?in_reply_to={_q(tweet_id)}"


def enrich_tweet(tweet: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``tweet`` with permalink and intent URLs added.

    Derived values depend only on ``id_str`` and ``user.screen_name`` (plus the
    ``in_reply_to_*`` pair for replies), so enriching twice is a no-op.
    ``in_reply_to_url`` is left out entirely when the tweet is not a reply.
    """
    user = dict(tweet.get("user") or {})
    screen_name = user.get("screen_name") or ""
    tweet_id = tweet.get("id_str") or ""

    user["url"] = get_user_url(screen_name)
    user["follow_url"] = get_follow_url(screen_name)

    enriched = dict(tweet)
    enriched.update(
        url=get_tweet_url(screen_name, tweet_id),
        user=user,
        like_url=get_like_url(tweet_id),
        reply_url=get_reply_url(tweet_id),
    )

    reply_to_id = tweet.get("in_reply_to_status_id_str")
    if reply_to_id:
        enriched["in_reply_to_url"] = get_tweet_url(tweet.get("in_reply_to_screen_name") or "", reply_to_id)
    else:
        enriched.pop("in_reply_to_url", None)
    return enriched
