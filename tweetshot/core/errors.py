from typing import Any


class TweetShotError(Exception):
    """Base error; ``status_code`` is the HTTP status the API answers with."""

    status_code = 500


class InvalidTweetIdError(TweetShotError):
    status_code = 400

    def __init__(self, tweet_id: str) -> None:
        super().__init__(f"Invalid tweet id: {tweet_id}")
        self.tweet_id = tweet_id


class TweetNotFoundError(TweetShotError):
    status_code = 404

    def __init__(self, tweet_id: str, tombstone: bool = False) -> None:
        super().__init__("Tweet not found")
        self.tweet_id = tweet_id
        self.tombstone = tombstone


class TwitterApiError(TweetShotError):
    def __init__(self, message: str, status: int, data: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.data = data


class SyndicationTransportError(TweetShotError):
    pass


class RenderError(TweetShotError):
    pass


class RequestTimeoutError(TweetShotError):
    status_code = 504
