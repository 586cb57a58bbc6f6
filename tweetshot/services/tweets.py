import logging
from typing import Any

from tweetshot.core.errors import TweetNotFoundError, TwitterApiError
from tweetshot.syndication.client import SyndicationClient, TweetFound, TweetTombstoned, UpstreamFailure
from tweetshot.syndication.enrich import enrich_tweet

logger = logging.getLogger(__name__)


class TweetService:
    def __init__(self, client: SyndicationClient) -> None:
        self.client = client

    async def get_tweet(self, tweet_id: str, enrich: bool = True) -> dict[str, Any]:
        outcome = await self.client.fetch(tweet_id)

        if isinstance(outcome, TweetFound) and outcome.tweet is not None:
            return enrich_tweet(outcome.tweet) if enrich else outcome.tweet
        if isinstance(outcome, UpstreamFailure):
            raise TwitterApiError(outcome.message, status=outcome.status, data=outcome.data)

        # a success without a JSON object body is reported like a missing tweet
        tombstone = isinstance(outcome, TweetTombstoned)
        logger.info("Tweet %s not available (tombstone=%s)", tweet_id, tombstone)
        raise TweetNotFoundError(tweet_id, tombstone=tombstone)
