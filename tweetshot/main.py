from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from tweetshot.api import health, tweet
from tweetshot.core.config import get_settings
from tweetshot.core.logging import configure_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    with configure_logging():
        yield


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.include_router(health.router)
    app.include_router(tweet.router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run("tweetshot.main:app", host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())
