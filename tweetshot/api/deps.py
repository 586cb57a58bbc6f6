from fastapi import Depends

from tweetshot.core.config import Settings, get_settings
from tweetshot.render.pipeline import TweetRenderer
from tweetshot.services.tweets import TweetService
from tweetshot.syndication.client import SyndicationClient


def get_syndication_client(settings: Settings = Depends(get_settings)) -> SyndicationClient:
    return SyndicationClient(settings)


def get_tweet_service(client: SyndicationClient = Depends(get_syndication_client)) -> TweetService:
    return TweetService(client)


def get_tweet_renderer(settings: Settings = Depends(get_settings)) -> TweetRenderer:
    return TweetRenderer(settings)
