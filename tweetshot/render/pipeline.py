import logging
from collections.abc import Mapping
from typing import Any, Protocol

from playwright.async_api import Browser, Playwright, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from tweetshot.core.config import Settings, get_settings
from tweetshot.core.errors import RenderError

from .embed import build_document

logger = logging.getLogger(__name__)

IMAGES_SETTLED_JS = "() => Array.from(document.images).every((img) => img.complete)"


class BrowserPage(Protocol):
    async def set_content(self, html: str, **kwargs: Any) -> None: ...

    async def evaluate(self, expression: str, arg: Any = None) -> Any: ...

    async def wait_for_timeout(self, timeout: float) -> None: ...

    async def wait_for_function(self, expression: str, **kwargs: Any) -> Any: ...

    async def screenshot(self, **kwargs: Any) -> bytes: ...


class BrowserHandle(Protocol):
    async def new_page(self, **kwargs: Any) -> BrowserPage: ...

    async def close(self) -> None: ...


class BrowserLauncher(Protocol):
    async def launch(self) -> BrowserHandle: ...


class _ChromiumHandle:
    """Browser plus the Playwright driver that owns it; closing stops both."""

    def __init__(self, playwright: Playwright, browser: Browser) -> None:
        self._playwright = playwright
        self._browser = browser

    async def new_page(self, **kwargs: Any) -> BrowserPage:
        return await self._browser.new_page(**kwargs)

    async def close(self) -> None:
        try:
            await self._browser.close()
        finally:
            await self._playwright.stop()


class ChromiumLauncher:
    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.executable_path = settings.browser_executable_path
        self.args = list(settings.browser_args)

    async def launch(self) -> BrowserHandle:
        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.launch(
                headless=True,
                args=self.args,
                executable_path=self.executable_path,
            )
        except BaseException:
            await playwright.stop()
            raise
        return _ChromiumHandle(playwright, browser)


class TweetRenderer:
    def __init__(self, settings: Settings | None = None, launcher: BrowserLauncher | None = None) -> None:
        settings = settings or get_settings()
        self.viewport = {"width": settings.viewport_width, "height": settings.viewport_height}
        self.settle_strategy = settings.settle_strategy
        self.settle_delay_ms = settings.settle_delay_ms
        self.launcher = launcher or ChromiumLauncher(settings)

    async def render(self, tweet: Mapping[str, Any]) -> bytes:
        """Screenshot ``tweet`` as a PNG with a transparent background."""
        html = build_document(tweet)
        try:
            browser = await self.launcher.launch()
        except Exception as exc:  # noqa: BLE001
            raise RenderError(f"Failed to launch browser: {exc}") from exc

        try:
            page = await browser.new_page(viewport=self.viewport)
            await page.set_content(html)
            await page.evaluate("() => window.scrollTo(0, 0)")
            await self._settle(page)
            image = await page.screenshot(type="png", omit_background=True)
        except Exception as exc:  # noqa: BLE001
            raise RenderError(f"Failed to render tweet {tweet.get('id_str')}: {exc}") from exc
        finally:
            await self._release(browser)

        logger.info("Rendered tweet %s (%s bytes)", tweet.get("id_str"), len(image))
        return image

    async def _settle(self, page: BrowserPage) -> None:
        if self.settle_strategy == "delay":
            await page.wait_for_timeout(self.settle_delay_ms)
            return
        if self.settle_delay_ms <= 0:
            # playwright reads timeout=0 as "wait forever"
            return
        try:
            await page.wait_for_function(IMAGES_SETTLED_JS, timeout=self.settle_delay_ms)
        except PlaywrightTimeoutError:
            logger.warning("Images still loading after %sms, capturing anyway", self.settle_delay_ms)

    @staticmethod
    async def _release(browser: BrowserHandle) -> None:
        try:
            await browser.close()
        except Exception:  # noqa: BLE001
            logger.exception("Failed to close browser")
