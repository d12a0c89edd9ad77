from __future__ import annotations

"""Selectors for the CSS locator practice page."""

from dataclasses import asdict, dataclass

from .bindings import BindingSet


@dataclass(frozen=True)
class CssTutorialSelectors:
    """Selector hints for ``site/index.html``.

    Each field practises one technique: ids for the name inputs, classes for
    the order summary, ``name`` attributes for the credentials, child
    combinators for the order details and the country dropdown, descendant
    combinators for the colour lists, and suffix/substring attribute matches
    for the address inputs.
    """

    first_name_field: str = "#firstName"
    surname_field: str = "#surname"
    postage: str = ".postage"
    sales_tax: str = ".sales-tax"
    email_field: str = "[name=email]"
    password_field: str = "[name=password]"
    order_details_title: str = "#order-details > h3"
    total_price: str = "#order-details > .total > .value"
    countries: str = "#country > option"
    available_colors: str = "#colors .available li"
    unavailable_colors: str = "#colors .unavailable li"
    street: str = "[placeholder$=Street]"
    city: str = "[placeholder*=City]"

    def as_bindings(self) -> BindingSet:
        return BindingSet.from_mapping(asdict(self))


CSS_TUTORIAL_SELECTORS = CssTutorialSelectors()
CSS_TUTORIAL_BINDINGS = CSS_TUTORIAL_SELECTORS.as_bindings()

__all__ = [
    "CSS_TUTORIAL_BINDINGS",
    "CSS_TUTORIAL_SELECTORS",
    "CssTutorialSelectors",
]
