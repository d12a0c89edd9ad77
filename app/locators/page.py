"""Page object for the CSS locator practice page."""
from __future__ import annotations

from . import config
from .documents import DocumentProvider
from .locator import ElementLocator, ResolvedCollection, ResolvedElement
from .selectors_css_tutorial import CSS_TUTORIAL_SELECTORS, CssTutorialSelectors


def _element(name: str) -> property:
    def getter(self: "CssTutorialPage") -> ResolvedElement:
        return self.locator.field(name)

    getter.__name__ = name
    getter.__doc__ = f"Resolve the ``{name}`` binding."
    return property(getter)


class CssTutorialPage:
    """The checkout page from ``site/index.html``.

    Field properties resolve on every access, so reading
    ``page.postage.text`` after the document changes sees the new value.
    """

    first_name_field = _element("first_name_field")
    surname_field = _element("surname_field")
    email_field = _element("email_field")
    password_field = _element("password_field")
    city = _element("city")
    street = _element("street")
    postage = _element("postage")
    sales_tax = _element("sales_tax")
    order_details_title = _element("order_details_title")
    total_price = _element("total_price")

    def __init__(
        self,
        document: DocumentProvider,
        *,
        selectors: CssTutorialSelectors = CSS_TUTORIAL_SELECTORS,
        url: str | None = None,
    ) -> None:
        self.selectors = selectors
        self.url = url
        self.locator = ElementLocator(document, selectors.as_bindings())

    @property
    def default_url(self) -> str:
        return self.url or config.default_page_url()

    def open(self) -> "CssTutorialPage":
        self.locator.document.navigate(self.default_url)
        return self

    @property
    def countries(self) -> ResolvedCollection:
        return self.locator.resolve_all("countries")

    def get_countries(self) -> list[str]:
        return self.locator.text_of(self.countries)

    def get_available_colors(self) -> list[str]:
        return self.locator.text_of(self.locator.resolve_all("available_colors"))

    def get_unavailable_colors(self) -> list[str]:
        return self.locator.text_of(self.locator.resolve_all("unavailable_colors"))

    def nth_available_color(self, index: int) -> str:
        return self.locator.nth("available_colors", index)

    def nth_unavailable_color(self, index: int) -> str:
        return self.locator.nth("unavailable_colors", index)


__all__ = ["CssTutorialPage"]
