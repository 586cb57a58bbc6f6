import copy

from tweetshot.syndication.enrich import enrich_tweet


def _tweet(**overrides):
    tweet = {
        "id_str": "1234567890123456789",
        "text": "hello world",
        "favorite_count": 12,
        "user": {"screen_name": "alice", "name": "Alice"},
        "in_reply_to_status_id_str": "",
        "in_reply_to_screen_name": "",
    }
    tweet.update(overrides)
    return tweet


def test_enrich_adds_derived_urls():
    enriched = enrich_tweet(_tweet())

    assert enriched["url"] == "https://x.com/alice/status/1234567890123456789"
    assert enriched["like_url"] == "https://x.com/intent/like?tweet_id=1234567890123456789"
    assert enriched["reply_url"] == "https://x.com/intent/tweet?in_reply_to=1234567890123456789"
    assert enriched["user"]["url"] == "https://x.com/alice"
    assert enriched["user"]["follow_url"] == "https://x.com/intent/follow?screen_name=alice"


def test_enrich_preserves_original_fields_and_input():
    tweet = _tweet(entities={"hashtags": []})
    snapshot = copy.deepcopy(tweet)

    enriched = enrich_tweet(tweet)

    assert tweet == snapshot
    for key, value in snapshot.items():
        if key == "user":
            continue
        assert enriched[key] == value
    for key, value in snapshot["user"].items():
        assert enriched["user"][key] == value


def test_non_reply_has_no_in_reply_to_url():
    enriched = enrich_tweet(_tweet())
    assert "in_reply_to_url" not in enriched

    enriched = enrich_tweet({"id_str": "1", "user": {"screen_name": "bob"}})
    assert "in_reply_to_url" not in enriched


def test_reply_gets_in_reply_to_url():
    enriched = enrich_tweet(_tweet(in_reply_to_status_id_str="42", in_reply_to_screen_name="bob"))

    assert enriched["in_reply_to_url"] == "https://x.com/bob/status/42"


def test_enrich_is_idempotent():
    once = enrich_tweet(_tweet(in_reply_to_status_id_str="42", in_reply_to_screen_name="bob"))
    twice = enrich_tweet(once)

    assert twice == once


def test_stale_in_reply_to_url_is_dropped():
    enriched = enrich_tweet(_tweet(in_reply_to_url="https://x.com/bob/status/42"))

    assert "in_reply_to_url" not in enriched


def test_screen_name_is_encoded_in_query():
    enriched = enrich_tweet(_tweet(user={"screen_name": "a&b=c"}))

    assert enriched["user"]["follow_url"] == "https://x.com/intent/follow?screen_name=a%26b%3Dc"


def test_null_reply_screen_name_is_not_stringified():
    enriched = enrich_tweet(_tweet(in_reply_to_status_id_str="42", in_reply_to_screen_name=None))

    assert enriched["in_reply_to_url"] == "https://x.com//status/42"
    assert "None" not in enriched["in_reply_to_url"]
