"""Upstream syndication API contract.

These values are dictated by cdn.syndication.twimg.com. They change when the
upstream changes, and every one of them has to match what it verifies.
"""

import math
import re

TWEET_RESULT_PATH = "/tweet-result"
TWEET_ID_RE = re.compile(r"[0-9]+")
MAX_TWEET_ID_LENGTH = 40

TOMBSTONE_TYPENAME = "TweetTombstone"

TOKEN_SCALE = 1e15
TOKEN_MULTIPLIER = math.pi
TOKEN_RADIX = 36
TOKEN_STRIPPED_CHARS = "0."

FEATURES = (
    "tfw_timeline_list:",
    "tfw_follower_count_sunset:true",
    "tfw_tweet_edit_backend:on",
    "tfw_refsrc_session:on",
    "tfw_fosnr_soft_interventions_enabled:on",
    "tfw_show_birdwatch_pivots_enabled:on",
    "tfw_show_business_verified_badge:on",
    "tfw_duplicate_scribes_to_settings:on",
    "tfw_use_profile_image_shape_enabled:on",
    "tfw_show_blue_verified_badge:on",
    "tfw_legacy_timeline_sunset:true",
    "tfw_show_gov_verified_badge:on",
    "tfw_show_business_affiliate_badge:on",
    "tfw_tweet_edit_frontend:on",
)


def features_param() -> str:
    return ";".join(FEATURES)


def is_valid_tweet_id(tweet_id: str) -> bool:
    return len(tweet_id) <= MAX_TWEET_ID_LENGTH and TWEET_ID_RE.fullmatch(tweet_id) is not None
