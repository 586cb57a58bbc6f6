import asyncio
import logging
from dataclasses import dataclass

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse, Response

from tweetshot.api import deps
from tweetshot.core.config import Settings, get_settings
from tweetshot.core.errors import RequestTimeoutError, TweetShotError
from tweetshot.render.pipeline import TweetRenderer
from tweetshot.services.tweets import TweetService

router = APIRouter(tags=["tweets"])
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TweetEndpoint:
    missing_id_message: str
    allow_image: bool
    enrich: bool


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_tweet_request(
    tweet_id: str | None,
    output_format: str | None,
    endpoint: TweetEndpoint,
    service: TweetService,
    renderer: TweetRenderer | None,
    settings: Settings,
) -> Response:
    if not tweet_id:
        return _error(status.HTTP_400_BAD_REQUEST, endpoint.missing_id_message)

    want_image = endpoint.allow_image and renderer is not None and (output_format or "").lower() == "image"

    async def produce() -> dict | bytes:
        # the embed markup links to the derived URLs, so images always use enriched data
        tweet = await service.get_tweet(tweet_id, enrich=endpoint.enrich or want_image)
        if want_image:
            return await renderer.render(tweet)
        return tweet

    timeout = settings.request_timeout_seconds
    try:
        try:
            result = await asyncio.wait_for(produce(), timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise RequestTimeoutError(f"Timed out after {timeout:g}s") from exc
    except TweetShotError as exc:
        logger.warning("Tweet %s request failed with %s: %s", tweet_id, exc.status_code, exc)
        return _error(exc.status_code, str(exc))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error handling tweet %s", tweet_id)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    if isinstance(result, bytes):
        return Response(
            content=result,
            media_type="image/png",
            headers={"Cache-Control": f"public, max-age={settings.cache_max_age}"},
        )
    return JSONResponse(content=result)


@router.get("/api/tweet")
async def get_tweet(
    tweet_id: str | None = Query(None, alias="id", description="Numeric tweet id"),
    output_format: str | None = Query(None, alias="format", description="'image' for a PNG, JSON otherwise"),
    service: TweetService = Depends(deps.get_tweet_service),
    renderer: TweetRenderer = Depends(deps.get_tweet_renderer),
    settings: Settings = Depends(get_settings),
):
    endpoint = TweetEndpoint(missing_id_message="Missing tweet ID", allow_image=True, enrich=settings.enrich_json)
    return await handle_tweet_request(tweet_id, output_format, endpoint, service, renderer, settings)


@router.get("/tweet")
async def get_enriched_tweet(
    tweet_id: str | None = Query(None, alias="id", description="Numeric tweet id"),
    service: TweetService = Depends(deps.get_tweet_service),
    settings: Settings = Depends(get_settings),
):
    endpoint = TweetEndpoint(missing_id_message="Missing tweet id", allow_image=False, enrich=True)
    return await handle_tweet_request(tweet_id, None, endpoint, service, None, settings)
