import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from tweetshot.core.config import Settings, get_settings
from tweetshot.core.errors import InvalidTweetIdError, SyndicationTransportError

from .contract import TOMBSTONE_TYPENAME, TWEET_RESULT_PATH, features_param, is_valid_tweet_id
from .token import get_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TweetFound:
    tweet: dict[str, Any] | None


@dataclass(frozen=True)
class TweetTombstoned:
    pass


@dataclass(frozen=True)
class TweetNotFound:
    pass


@dataclass(frozen=True)
class UpstreamFailure:
    status: int
    message: str
    data: Any = field(default=None, repr=False)


FetchOutcome = TweetFound | TweetTombstoned | TweetNotFound | UpstreamFailure


class SyndicationClient:
    """Reads single tweets from the public syndication (embed) API."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.base_url = settings.syndication_base_url.rstrip("/")
        self.lang = settings.syndication_lang
        self.timeout = settings.syndication_timeout_seconds
        self.transport = transport

    def build_url(self, tweet_id: str) -> httpx.URL:
        return httpx.URL(
            f"{self.base_url}{TWEET_RESULT_PATH}",
            params={
                "id": tweet_id,
                "lang": self.lang,
                "features": features_param(),
                "token": get_token(tweet_id),
            },
        )

    async def fetch(self, tweet_id: str) -> FetchOutcome:
        if not is_valid_tweet_id(tweet_id):
            raise InvalidTweetIdError(tweet_id)

        url = self.build_url(tweet_id)
        logger.debug("Fetching tweet %s", tweet_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
        except httpx.TransportError as exc:
            raise SyndicationTransportError(f"Failed to reach syndication API for tweet {tweet_id}: {exc}") from exc

        return classify_response(response)


def _parse_json(response: httpx.Response) -> Any:
    if "application/json" not in response.headers.get("content-type", ""):
        return None
    try:
        return response.json()
    except ValueError:
        logger.warning("Syndication API sent unparseable JSON with status %s", response.status_code)
        return None


def classify_response(response: httpx.Response) -> FetchOutcome:
    data = _parse_json(response)

    if isinstance(data, dict) and data.get("__typename") == TOMBSTONE_TYPENAME:
        return TweetTombstoned()
    if response.is_success:
        return TweetFound(tweet=data if isinstance(data, dict) else None)
    if response.status_code == 404:
        return TweetNotFound()

    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, str):
        message = error
    else:
        message = f'Failed to fetch tweet at "{response.request.url}" with "{response.status_code}".'
    logger.warning("Syndication API error %s: %s", response.status_code, message)
    return UpstreamFailure(
        status=response.status_code,
        message=message,
        data=data if data is not None else response.text,
    )
