"""
Browser-free stand-ins for the Playwright objects the scraper touches.
"""

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from glints_scraper.config.settings import settings


def make_card(
    title="Frontend Developer",
    company_location="Acme Inc (PT)Jakarta, Indonesia",
    tags=("Perusahaan Premium", "Remote", "Full-time"),
    href="/opportunities/jobs/123",
    text="Frontend Developer\nAcme Inc\nRp 8.000.000 - Rp 12.000.000\n2 hari yang lalu",
):
    """Snapshot in the shape CARD_SNAPSHOT_SCRIPT returns."""
    return {
        "title": title,
        "companyLocation": company_location,
        "tags": list(tags),
        "href": href,
        "text": text,
    }


class FakePage:
    """
    Answers ``document.body.scrollHeight`` from a list of heights (the last one
    repeats), returns ``cards`` for the snapshot script, and records calls.
    """

    def __init__(self, cards=None, heights=(1000,), goto_timeout=False, cards_timeout=False):
        self.cards = cards or []
        self.heights = list(heights)
        self.goto_timeout = goto_timeout
        self.cards_timeout = cards_timeout
        self.visited = []
        self.scrolls = 0
        self.waits = []
        self.selector_waits = []

    async def goto(self, url, wait_until=None, timeout=None):
        self.visited.append((url, wait_until, timeout))
        if self.goto_timeout:
            raise PlaywrightTimeoutError("Timeout exceeded while navigating")

    async def evaluate(self, script, arg=None):
        if script == "document.body.scrollHeight":
            index = min(self.scrolls, len(self.heights) - 1)
            return self.heights[index]
        if script.startswith("window.scrollBy"):
            self.scrolls += 1
            return None
        return self.cards

    async def wait_for_timeout(self, ms):
        self.waits.append(ms)

    async def wait_for_selector(self, selector, timeout=None):
        self.selector_waits.append((selector, timeout))
        if self.cards_timeout:
            raise PlaywrightTimeoutError(f"Timeout waiting for {selector}")


class FakeContext:
    def __init__(self, page):
        self.page = page
        self.closed = False
        self.init_scripts = []
        self.options = {}

    async def new_page(self):
        return self.page

    async def add_init_script(self, script):
        self.init_scripts.append(script)

    async def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self, context):
        self.context = context
        self.closed = False

    async def new_context(self, **options):
        self.context.options = options
        return self.context

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, browser, error=None):
        self.browser = browser
        self.error = error
        self.launched = None
        self.connected = None

    async def launch(self, **kwargs):
        self.launched = kwargs
        if self.error:
            raise self.error
        return self.browser

    async def connect_over_cdp(self, endpoint, **kwargs):
        self.connected = (endpoint, kwargs)
        if self.error:
            raise self.error
        return self.browser


class FakePlaywright:
    def __init__(self, chromium):
        self.chromium = chromium
        self.stopped = False

    async def stop(self):
        self.stopped = True


class FakePlaywrightManager:
    """Mimics ``async_playwright()``: call it, then ``await .start()``."""

    def __init__(self, playwright):
        self.playwright = playwright

    def __call__(self):
        return self

    async def start(self):
        return self.playwright


class FakeStack:
    """Wires a page through context, browser and Playwright fakes."""

    def __init__(self, page=None, launch_error=None):
        self.page = page or FakePage()
        self.context = FakeContext(self.page)
        self.browser = FakeBrowser(self.context)
        self.chromium = FakeChromium(self.browser, error=launch_error)
        self.playwright = FakePlaywright(self.chromium)
        self.factory = FakePlaywrightManager(self.playwright)


@pytest.fixture
def fast_scroll(monkeypatch):
    """Keep scroll loops short and wait-free."""
    monkeypatch.setattr(settings, "SCROLL_INTERVAL", 0)
    monkeypatch.setattr(settings, "MAX_SCROLL_STEPS", 50)
    monkeypatch.setattr(settings, "MAX_SCROLL_SECONDS", 30.0)


@pytest.fixture
def local_browser(monkeypatch):
    monkeypatch.setattr(settings, "BROWSER_WS_ENDPOINT", None)
    monkeypatch.setattr(settings, "BROWSER_TOKEN", None)
    monkeypatch.setattr(settings, "USER_AGENT", "TestAgent/1.0 (Windows)")
