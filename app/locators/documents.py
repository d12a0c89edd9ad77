"""Document providers the locator layer queries."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Protocol
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests
import soupsieve
from bs4 import BeautifulSoup

from . import config
from .exceptions import InvalidSelectorError
from .utils import log_line, normalise_text


class DocumentProvider(Protocol):
    """A live, queryable document.

    ``query`` evaluates a CSS selector in either single-match or all-match
    mode and returns opaque node handles in document order. Handles are only
    valid until the document changes; callers re-query rather than keep them.
    """

    def navigate(self, url: str) -> None:
        ...

    def query(self, selector: str, *, single: bool) -> list[Any]:
        ...

    def text(self, handle: Any) -> str:
        ...

    def attribute(self, handle: Any, name: str) -> Optional[str]:
        ...


def _parse(source: str) -> BeautifulSoup:
    # Plain string attributes, so ``class`` reads back exactly as written.
    return BeautifulSoup(source, "html5lib", multi_valued_attributes=None)


class SoupDocument:
    """Static HTML parsed with BeautifulSoup.

    There is no browser, so no layout either: text is the concatenated text
    nodes with whitespace collapsed, which matches what a browser renders for
    the simple inline content of the practice page.
    """

    def __init__(self, source: str = "", *, url: str | None = None) -> None:
        self.url = url
        self._soup = _parse(source)

    @classmethod
    def from_path(cls, path: Path | str) -> "SoupDocument":
        path = Path(path)
        return cls(path.read_text(encoding="utf-8"), url=path.resolve().as_uri())

    def replace_source(self, source: str) -> None:
        """Swap in new markup; later queries see only the new document."""

        self._soup = _parse(source)

    def navigate(self, url: str) -> None:
        """Load ``url``: a ``file://`` URL, a plain path, or an HTTP(S) URL."""

        parsed = urlparse(url)
        if parsed.scheme in {"http", "https"}:
            log_line(f"Fetching {url}")
            response = requests.get(url, timeout=config.PAGE_LOAD_TIMEOUT_SECONDS)
            response.raise_for_status()
            self.replace_source(response.text)
            self.url = url
            return

        if parsed.scheme == "file":
            path = Path(url2pathname(parsed.path))
        elif not parsed.scheme or len(parsed.scheme) == 1:
            # No scheme, or a Windows drive letter.
            path = Path(url)
        else:
            raise ValueError(f"Unsupported URL scheme for static documents: {url}")

        self.replace_source(path.read_text(encoding="utf-8"))
        self.url = path.resolve().as_uri()

    def query(self, selector: str, *, single: bool) -> list[Any]:
        try:
            if single:
                node = self._soup.select_one(selector)
                return [node] if node is not None else []
            return list(self._soup.select(selector))
        except soupsieve.SelectorSyntaxError as exc:
            raise InvalidSelectorError(
                f"Invalid CSS selector {selector!r}: {exc}", selector=selector
            ) from exc

    def text(self, handle: Any) -> str:
        return normalise_text(handle.get_text(" "))

    def attribute(self, handle: Any, name: str) -> Optional[str]:
        value = handle.get(name)
        if value is None:
            return None
        return str(value)


__all__ = ["DocumentProvider", "SoupDocument"]
