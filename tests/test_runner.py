import asyncio

import pytest
from conftest import FakePage, FakeStack, make_card

from glints_scraper.browser.session import BrowserSession
from glints_scraper.config.settings import settings
from glints_scraper.core.errors import (
    BrowserConnectionError,
    DeadlineExceededError,
    NavigationTimeoutError,
)
from glints_scraper.core.models import JobRecord
from glints_scraper.core.runner import Runner, build_query, summarize_results


def make_runner(stack):
    return Runner(session_factory=lambda: BrowserSession(playwright_factory=stack.factory))


def fixture_cards():
    """Two malformed cards among twelve good ones."""
    good = [make_card(title=f"Frontend Developer {i}") for i in range(12)]
    return good[:3] + [make_card(title="")] + good[3:6] + [make_card(title=None)] + good[6:]


def test_end_to_end_caps_at_eight_in_dom_order(local_browser, fast_scroll):
    stack = FakeStack(page=FakePage(cards=fixture_cards()))

    jobs = asyncio.run(make_runner(stack).run("frontend developer"))

    assert len(jobs) == 8
    assert [job.title for job in jobs] == [f"Frontend Developer {i}" for i in range(8)]
    assert all(job.title and job.company for job in jobs)
    assert "keyword=frontend+developer" in stack.page.visited[0][0]
    assert stack.browser.closed


def test_limit_never_exceeds_nine(local_browser, fast_scroll):
    cards = [make_card(title=f"Job {i}") for i in range(20)]
    stack = FakeStack(page=FakePage(cards=cards))

    jobs = asyncio.run(make_runner(stack).run("developer", limit=50))

    assert len(jobs) == 9


def test_no_listings_returns_empty_list(local_browser, fast_scroll):
    stack = FakeStack(page=FakePage(cards_timeout=True))

    jobs = asyncio.run(make_runner(stack).run("underwater basket weaving"))

    assert jobs == []
    assert stack.context.closed
    assert stack.playwright.stopped


def test_navigation_timeout_propagates_after_cleanup(local_browser, fast_scroll):
    stack = FakeStack(page=FakePage(goto_timeout=True))

    with pytest.raises(NavigationTimeoutError):
        asyncio.run(make_runner(stack).run("frontend developer"))

    assert stack.browser.closed


def test_connection_error_propagates(local_browser):
    from playwright.async_api import Error as PlaywrightError

    stack = FakeStack(launch_error=PlaywrightError("connect ECONNREFUSED"))

    with pytest.raises(BrowserConnectionError):
        asyncio.run(make_runner(stack).run("frontend developer"))


def test_retry_reacquires_session(local_browser, fast_scroll, monkeypatch):
    monkeypatch.setattr(settings, "MAX_RETRIES", 1)
    monkeypatch.setattr(settings, "RETRY_BASE_DELAY", 0)
    attempts = []
    page = FakePage(cards=[make_card()])

    class FlakySession(BrowserSession):
        async def open(self):
            attempts.append(1)
            if len(attempts) == 1:
                raise BrowserConnectionError("service busy")
            return await super().open()

    stack = FakeStack(page=page)
    runner = Runner(session_factory=lambda: FlakySession(playwright_factory=stack.factory))

    jobs = asyncio.run(runner.run("frontend developer"))

    assert len(attempts) == 2
    assert len(jobs) == 1


def test_deadline_exceeded(local_browser, monkeypatch):
    monkeypatch.setattr(settings, "SCRAPE_DEADLINE", 0.05)

    class SlowPage(FakePage):
        async def goto(self, url, wait_until=None, timeout=None):
            await asyncio.sleep(5)

    stack = FakeStack(page=SlowPage())

    with pytest.raises(DeadlineExceededError):
        asyncio.run(make_runner(stack).run("frontend developer"))

    assert stack.context.closed
    assert stack.playwright.stopped


def test_blank_query_rejected_before_browser_opens(local_browser):
    stack = FakeStack()

    with pytest.raises(ValueError):
        asyncio.run(make_runner(stack).run("  "))

    assert stack.chromium.launched is None


def test_unknown_portal():
    with pytest.raises(ValueError, match="not supported"):
        asyncio.run(Runner().run("developer", portal="monster"))


def test_build_query_joins_skills_and_industry():
    assert build_query(["React", " TypeScript ", ""], "Fintech") == "React TypeScript Fintech"
    assert build_query([], None) == ""


def test_summarize_results():
    job = JobRecord(title="Dev", company="Acme")
    assert summarize_results([job, job]) == "Showing 2 jobs"
    assert summarize_results([job]) == "Showing 1 job"
    assert summarize_results([]).startswith("No jobs found")


def test_adapters_registered_by_name():
    from glints_scraper.adapters.glints.adapter import GlintsAdapter
    from glints_scraper.core.runner import ADAPTERS

    assert ADAPTERS == {"glints": GlintsAdapter}
    assert ADAPTERS[GlintsAdapter.name] is GlintsAdapter
