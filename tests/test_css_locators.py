from __future__ import annotations

from app.locators.page import CssTutorialPage

#
# Locating elements by ID
#


def test_locate_first_name_by_id(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.first_name_field.get_attribute("placeholder") == "Enter first name"


def test_locate_surname_by_id(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.surname_field.get_attribute("placeholder") == "Enter surname"


#
# Locating elements by CSS class
#


def test_locate_postage_cost(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.postage.text == "5"


def test_locate_sales_tax(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.sales_tax.text == "20"


#
# Locating elements by attribute
#


def test_locate_email_field_by_name(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.email_field.get_attribute("placeholder") == "Enter email"


def test_locate_password_field_by_name(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.password_field.get_attribute("placeholder") == "Password"


#
# Locating child elements
#


def test_locate_order_details_title(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.order_details_title.text == "Order"


def test_locate_total_price(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.total_price.text == "125"


def test_locate_all_countries(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.get_countries() == [
        "England",
        "France",
        "Ireland",
        "Italy",
        "Scotland",
        "Wales",
    ]


#
# Locating indirect children
#


def test_locate_available_colors(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.get_available_colors() == ["Blue", "Red", "Yellow", "Green"]


def test_locate_unavailable_colors(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.get_unavailable_colors() == ["Cyan", "Grey"]


#
# Locating specific elements
#


def test_locate_2nd_available_color(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.nth_available_color(2) == "Red"


def test_locate_2nd_unavailable_color(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.nth_unavailable_color(2) == "Grey"


def test_locate_field_by_partial_attribute_value(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.street.get_attribute("placeholder") == "Enter Street"


def test_locate_city_field_by_partial_attribute_value(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.city.get_attribute("placeholder") == "Enter City"


def test_open_uses_bundled_page_by_default(on_the_page: CssTutorialPage) -> None:
    assert on_the_page.locator.document.url.endswith("/site/index.html")
    assert on_the_page.default_url == on_the_page.locator.document.url
