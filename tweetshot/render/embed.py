"""Embedded-tweet markup and the page wrapped around it for capture."""

from collections.abc import Mapping
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).parent / "templates"
THEME_CSS_PATH = TEMPLATES_DIR / "theme.css"


@lru_cache()
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html"]),
    )


@lru_cache()
def load_theme_css() -> str:
    return THEME_CSS_PATH.read_text(encoding="utf-8")


def format_count(count: int | None) -> str:
    if not count:
        return "0"
    if count < 1000:
        return str(count)
    if count < 1_000_000:
        return f"{count / 1000:.1f}".rstrip("0").rstrip(".") + "K"
    return f"{count / 1_000_000:.1f}".rstrip("0").rstrip(".") + "M"


def format_created_at(value: str | None) -> str:
    if not value:
        return ""
    try:
        created_at = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    hour = created_at.hour % 12 or 12
    meridiem = "AM" if created_at.hour < 12 else "PM"
    return f"{hour}:{created_at.minute:02d} {meridiem} · {created_at:%b} {created_at.day}, {created_at.year}"


def render_embedded_tweet(tweet: Mapping[str, Any]) -> str:
    """HTML fragment for one tweet; expects enriched data for the link targets."""
    template = _environment().get_template("embedded_tweet.html")
    return template.render(
        tweet=tweet,
        like_count=format_count(tweet.get("favorite_count")),
        created_at_label=format_created_at(tweet.get("created_at")),
    )


def build_document(tweet: Mapping[str, Any], styles: str | None = None) -> str:
    template = _environment().get_template("document.html")
    return template.render(
        styles=load_theme_css() if styles is None else styles,
        embed=render_embedded_tweet(tweet),
    )
