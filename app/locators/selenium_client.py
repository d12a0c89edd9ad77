"""Selenium helpers for opening the practice page in Chrome."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from selenium import webdriver
from selenium.common.exceptions import InvalidSelectorException, NoSuchElementException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver

from . import config
from .exceptions import InvalidSelectorError
from .logging_utils import _locator_event
from .utils import ensure_dirs, log_line, normalise_text


class SeleniumDocument:
    """The page currently loaded in a WebDriver session."""

    def __init__(self, driver: WebDriver) -> None:
        self.driver = driver

    def navigate(self, url: str) -> None:
        self.driver.get(url)

    def query(self, selector: str, *, single: bool) -> list[Any]:
        # InvalidSelectorException subclasses NoSuchElementException in some
        # Selenium releases, so it has to be caught first.
        try:
            if single:
                return [self.driver.find_element(By.CSS_SELECTOR, selector)]
            return list(self.driver.find_elements(By.CSS_SELECTOR, selector))
        except InvalidSelectorException as exc:
            raise InvalidSelectorError(
                f"Invalid CSS selector {selector!r}: {exc.msg}", selector=selector
            ) from exc
        except NoSuchElementException:
            return []

    def text(self, handle: Any) -> str:
        return normalise_text(handle.text)

    def attribute(self, handle: Any, name: str) -> Optional[str]:
        return handle.get_dom_attribute(name)


def make_driver() -> WebDriver:
    """Instantiate a Chrome WebDriver configured from :mod:`config`."""
    ensure_dirs()
    chrome_options = Options()
    if config.CHROME_BINARY:
        chrome_options.binary_location = config.CHROME_BINARY
    if config.HEADLESS:
        chrome_options.add_argument("--headless=new")
    chrome_options.add_argument("--disable-gpu")
    chrome_options.add_argument("--no-sandbox")
    chrome_options.add_argument("--disable-dev-shm-usage")
    chrome_options.add_argument(f"--window-size={config.WINDOW_SIZE}")
    driver = webdriver.Chrome(options=chrome_options)
    driver.set_page_load_timeout(config.PAGE_LOAD_TIMEOUT_SECONDS)
    driver.implicitly_wait(config.IMPLICIT_WAIT_SECONDS)
    return driver


def open_page(driver: WebDriver, url: str | None = None) -> SeleniumDocument:
    """Navigate ``driver`` to ``url`` (the practice page by default)."""

    target = url or config.default_page_url()
    log_line(f"Loading page {target}")
    document = SeleniumDocument(driver)
    document.navigate(target)
    _locator_event("session", backend="selenium", url=target, title=driver.title)
    return document


@contextmanager
def selenium_document(url: str | None = None) -> Iterator[SeleniumDocument]:
    """Yield a document for ``url`` and quit the browser afterwards."""

    driver = make_driver()
    try:
        yield open_page(driver, url)
    finally:
        driver.quit()


__all__ = ["SeleniumDocument", "make_driver", "open_page", "selenium_document"]
