"""Shared pytest fixtures for tweetshot tests."""

import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakePage:
    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[tuple[str, object]] = []
        self.html: str | None = None

    def _step(self, name: str, payload: object = None) -> None:
        self.calls.append((name, payload))
        if self.fail_on == name:
            raise RuntimeError(f"{name} exploded")

    async def set_content(self, html, **kwargs):
        self.html = html
        self._step("set_content")

    async def evaluate(self, expression, arg=None):
        self._step("evaluate", expression)

    async def wait_for_timeout(self, timeout):
        self._step("wait_for_timeout", timeout)

    async def wait_for_function(self, expression, **kwargs):
        self._step("wait_for_function", kwargs)

    async def screenshot(self, **kwargs):
        self._step("screenshot", kwargs)
        return PNG_BYTES


class FakeBrowser:
    def __init__(self, page: FakePage, fail_on: str | None = None) -> None:
        self.page = page
        self.fail_on = fail_on
        self.viewport = None
        self.close_calls = 0

    async def new_page(self, **kwargs):
        self.viewport = kwargs.get("viewport")
        if self.fail_on == "new_page":
            raise RuntimeError("new_page exploded")
        return self.page

    async def close(self):
        self.close_calls += 1
        if self.fail_on == "close":
            raise RuntimeError("close exploded")


class FakeLauncher:
    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.page = FakePage(fail_on=fail_on)
        self.browser = FakeBrowser(self.page, fail_on=fail_on)
        self.launches = 0

    async def launch(self):
        self.launches += 1
        if self.fail_on == "launch":
            raise RuntimeError("executable not found")
        return self.browser


@pytest.fixture
def fake_launcher_factory():
    return FakeLauncher


@pytest.fixture
def sample_tweet():
    return {
        "__typename": "Tweet",
        "id_str": "1234567890123456789",
        "text": "Shipping <b>today</b> & tomorrow",
        "created_at": "2023-10-05T14:07:00.000Z",
        "favorite_count": 1520,
        "lang": "en",
        "user": {
            "screen_name": "alice",
            "name": "Alice",
            "profile_image_url_https": "https://pbs.twimg.com/profile_images/1/alice_normal.jpg",
            "is_blue_verified": True,
        },
        "in_reply_to_status_id_str": "",
        "in_reply_to_screen_name": "",
    }
