from __future__ import annotations

import dataclasses

import pytest

from app.locators.bindings import BindingSet, SelectorBinding, validate_selector
from app.locators.error_codes import ErrorCode
from app.locators.exceptions import InvalidSelectorError, LocatorError, UnknownFieldError


def test_binding_is_immutable() -> None:
    binding = SelectorBinding("postage", ".postage")

    with pytest.raises(dataclasses.FrozenInstanceError):
        binding.selector = ".sales-tax"  # type: ignore[misc]


@pytest.mark.parametrize("selector", ["div[", "", "   ", "#order-details >"])
def test_invalid_selector_rejected_at_declaration(selector: str) -> None:
    with pytest.raises(InvalidSelectorError) as excinfo:
        SelectorBinding("broken", selector)

    assert excinfo.value.error_code == ErrorCode.INVALID_SELECTOR
    assert excinfo.value.selector == selector


def test_blank_name_rejected() -> None:
    with pytest.raises(InvalidSelectorError):
        SelectorBinding(" ", "#firstName")


def test_validate_selector_accepts_query_language_subset() -> None:
    for selector in (
        "#firstName",
        ".sales-tax",
        "[name=email]",
        "[placeholder$=Street]",
        "[placeholder*=City]",
        "#order-details > h3",
        "#colors .available li:nth-child(2)",
    ):
        assert validate_selector(selector) == selector


def test_binding_set_lookup_and_duplicates() -> None:
    bindings = BindingSet.from_mapping({"first": "#firstName", "last": "#surname"})

    assert list(bindings) == ["first", "last"]
    assert "first" in bindings
    assert "middle" not in bindings
    assert bindings.get("middle") is None
    assert bindings.selector_for("last") == "#surname"

    with pytest.raises(ValueError):
        BindingSet([SelectorBinding("a", "#a"), SelectorBinding("a", "#b")])


def test_unknown_field_is_both_locator_and_key_error() -> None:
    bindings = BindingSet()

    with pytest.raises(UnknownFieldError) as excinfo:
        bindings["missing"]

    assert isinstance(excinfo.value, LocatorError)
    assert isinstance(excinfo.value, KeyError)
    assert excinfo.value.error_code == ErrorCode.UNKNOWN_FIELD
    assert "missing" in str(excinfo.value)
