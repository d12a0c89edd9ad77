# app/locators/playwright_client.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from playwright.sync_api import Page, sync_playwright

from . import config
from .bindings import validate_selector
from .logging_utils import _locator_event
from .utils import log_line, normalise_text


class PlaywrightDocument:
    """The page currently loaded in a Playwright tab.

    Selectors are sent with the ``css=`` engine prefix so Playwright never
    reinterprets them as text or XPath.
    """

    def __init__(self, page: Page) -> None:
        self.page = page

    def navigate(self, url: str) -> None:
        self.page.goto(
            url,
            wait_until="domcontentloaded",
            timeout=config.PAGE_LOAD_TIMEOUT_SECONDS * 1000,
        )

    def query(self, selector: str, *, single: bool) -> list[Any]:
        # Playwright raises a generic Error for malformed CSS.
        validate_selector(selector)
        engine_selector = f"css={selector}"
        if single:
            handle = self.page.query_selector(engine_selector)
            return [handle] if handle is not None else []
        return list(self.page.query_selector_all(engine_selector))

    def text(self, handle: Any) -> str:
        return normalise_text(handle.inner_text())

    def attribute(self, handle: Any, name: str) -> Optional[str]:
        return handle.get_attribute(name)


def open_page(page: Page, url: str | None = None) -> PlaywrightDocument:
    target = url or config.default_page_url()
    log_line(f"Loading page {target}")
    document = PlaywrightDocument(page)
    document.navigate(target)
    _locator_event("session", backend="playwright", url=target, title=page.title())
    return document


@contextmanager
def playwright_document(url: str | None = None) -> Iterator[PlaywrightDocument]:
    """Launch Chromium, open ``url`` and yield its document."""

    with sync_playwright() as pw:
        browser = pw.chromium.launch(headless=config.HEADLESS)
        try:
            context = browser.new_context(locale="en-US")
            try:
                page = context.new_page()
                yield open_page(page, url)
            finally:
                context.close()
        finally:
            browser.close()


__all__ = ["PlaywrightDocument", "open_page", "playwright_document"]
