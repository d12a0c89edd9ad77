"""Configuration constants for the locator tutorial."""
from __future__ import annotations

import os
from pathlib import Path

DATA_DIR: Path = Path(os.getenv("LOCATORS_DATA_DIR", "/tmp/locator_tutorial"))
LOG_DIR: Path = DATA_DIR / "logs"
LOG_FILE: Path = LOG_DIR / "latest.log"

# The bundled practice page lives next to this module unless overridden.
SITE_DIR: Path = Path(os.getenv("LOCATORS_SITE_DIR", str(Path(__file__).resolve().parent / "site")))
DEFAULT_PAGE_PATH: Path = SITE_DIR / "index.html"

BACKENDS: tuple[str, ...] = ("soup", "selenium", "playwright")
BACKEND: str = os.getenv("LOCATORS_BACKEND", "soup").strip().lower() or "soup"

CHROME_BINARY: str = os.getenv("LOCATORS_CHROME_BINARY", "/usr/bin/chromium")
HEADLESS: bool = os.getenv("LOCATORS_HEADLESS", "true").strip().lower() not in {"0", "false"}
WINDOW_SIZE: str = os.getenv("LOCATORS_WINDOW_SIZE", "1920,1080")


def _parse_timeout_seconds(env_var: str, default: int, *, minimum: int = 1) -> int:
    """Parse a timeout value in seconds from the environment with bounds."""

    try:
        value = int(os.getenv(env_var, str(default)))
    except ValueError:
        return default
    return max(minimum, value)


# Navigation timeout for driver.get / page.goto.
PAGE_LOAD_TIMEOUT_SECONDS: int = _parse_timeout_seconds(
    "LOCATORS_PAGE_LOAD_TIMEOUT_SECONDS", 20
)
# Browser-side polling before an element lookup gives up. Zero disables it.
IMPLICIT_WAIT_SECONDS: int = _parse_timeout_seconds(
    "LOCATORS_IMPLICIT_WAIT_SECONDS", 0, minimum=0
)


def default_page_url() -> str:
    """Return the ``file://`` URL of the practice page."""

    return DEFAULT_PAGE_PATH.resolve().as_uri()
