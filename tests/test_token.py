import pytest

from tweetshot.syndication.token import get_token, to_radix_string


@pytest.mark.parametrize(
    "value, radix, expected",
    [
        (0.0, 36, "0"),
        (36.0, 36, "10"),
        (255.0, 16, "ff"),
        (0.5, 36, "0.i"),
        (1.5, 36, "1.i"),
        (0.25, 2, "0.01"),
        (-2.5, 10, "-2.5"),
    ],
)
def test_to_radix_string_matches_javascript(value, radix, expected):
    assert to_radix_string(value, radix) == expected


def test_to_radix_string_rejects_bad_radix():
    with pytest.raises(ValueError):
        to_radix_string(1.0, 37)


@pytest.mark.parametrize(
    "tweet_id",
    ["1", "20", "1234567890123456789", "1683920951807971329", "9" * 40],
)
def test_token_is_deterministic_and_stripped(tweet_id):
    token = get_token(tweet_id)
    assert token == get_token(tweet_id)
    assert token
    assert "0" not in token
    assert "." not in token


@pytest.mark.parametrize(
    "tweet_id, expected",
    [
        ("1", "bhi2ay3f28n"),
        ("20", "6dq1a2xwd93"),
        ("1234567890123456789", "2zqic77uqyk"),
        ("1683920951807971329", "42y6zv7ufp"),
    ],
)
def test_token_matches_upstream_values(tweet_id, expected):
    assert get_token(tweet_id) == expected


def test_ids_sharing_a_double_share_a_token():
    assert get_token("1683920951807971329") == get_token("1683920951807971330")
