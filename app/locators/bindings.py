from __future__ import annotations

"""Named selector bindings.

A binding ties a logical field name (``first_name_field``) to the CSS
expression that finds it. Bindings are declared once at setup time and never
mutated; resolution happens later through :class:`ElementLocator`.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

import soupsieve

from .exceptions import InvalidSelectorError, UnknownFieldError


def validate_selector(selector: str) -> str:
    """Return ``selector`` unchanged if it parses as CSS, else raise."""

    if not isinstance(selector, str) or not selector.strip():
        raise InvalidSelectorError("Selector must be a non-empty string", selector=selector)
    try:
        soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise InvalidSelectorError(
            f"Invalid CSS selector {selector!r}: {exc}", selector=selector
        ) from exc
    return selector


@dataclass(frozen=True)
class SelectorBinding:
    """A logical field name bound to a CSS selector expression."""

    name: str
    selector: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidSelectorError("Binding name must be non-empty", selector=self.selector)
        validate_selector(self.selector)


class BindingSet(Mapping[str, SelectorBinding]):
    """Read-only mapping of field name to :class:`SelectorBinding`."""

    def __init__(self, bindings: Iterable[SelectorBinding] = ()) -> None:
        collected: dict[str, SelectorBinding] = {}
        for binding in bindings:
            if binding.name in collected:
                raise ValueError(f"Duplicate binding for field {binding.name!r}")
            collected[binding.name] = binding
        self._bindings = MappingProxyType(collected)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "BindingSet":
        """Build a binding set from ``{name: selector}`` pairs."""

        return cls(SelectorBinding(name, selector) for name, selector in mapping.items())

    def __getitem__(self, name: str) -> SelectorBinding:
        try:
            return self._bindings[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def selector_for(self, name: str) -> str:
        return self[name].selector

    def __repr__(self) -> str:
        return f"BindingSet({list(self._bindings.values())!r})"


__all__ = ["BindingSet", "SelectorBinding", "validate_selector"]
