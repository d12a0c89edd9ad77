from __future__ import annotations

"""Element locator and query layer.

``ElementLocator`` turns field names, bindings or raw CSS strings into
lookups against a live document provider. Nothing is cached: every call, and
every read of a resolved element, goes back to the document, so results always
reflect its current state.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, NoReturn, Optional, Sequence, Union, overload

from .bindings import BindingSet, SelectorBinding
from .documents import DocumentProvider
from .exceptions import AmbiguousMatchError, LocatorError, NotFoundError
from .logging_utils import _locator_event

Target = Union[SelectorBinding, str]


@dataclass(frozen=True, eq=False)
class ResolvedElement:
    """A single match, identified by its selector and position among matches.

    The element keeps no node handle of its own. ``text`` and
    ``get_attribute`` re-run the query on every access and raise
    :class:`NotFoundError` if the node has since disappeared.

    Two elements are equal when they come from the same document object and
    share selector and position.
    """

    locator: "ElementLocator" = dataclasses.field(repr=False)
    selector: str
    position: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedElement):
            return NotImplemented
        return (
            self.locator.document is other.locator.document
            and self.selector == other.selector
            and self.position == other.position
        )

    def __hash__(self) -> int:
        return hash((id(self.locator.document), self.selector, self.position))

    def _handle(self) -> Any:
        return self.locator._handle_at(self.selector, self.position)

    @property
    def text(self) -> str:
        return self.locator.document.text(self._handle())

    def get_attribute(self, name: str) -> Optional[str]:
        """Return the attribute value, or ``None`` when it is not present."""

        return self.locator.document.attribute(self._handle(), name)


@dataclass(frozen=True)
class ResolvedCollection(Sequence[ResolvedElement]):
    """Every match of ``selector`` at resolution time, in document order."""

    selector: str
    elements: tuple[ResolvedElement, ...] = ()

    @overload
    def __getitem__(self, index: int) -> ResolvedElement:
        ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[ResolvedElement]:
        ...

    def __getitem__(self, index):
        return self.elements[index]

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[ResolvedElement]:
        return iter(self.elements)

    def texts(self) -> list[str]:
        return [element.text for element in self.elements]


def _fail(error: LocatorError) -> NoReturn:
    _locator_event(
        "error",
        error_code=error.error_code,
        selector=error.selector,
        message=str(error),
    )
    raise error


class ElementLocator:
    """Resolve selectors against ``document``.

    ``bindings`` is optional. When given, any string that names a binding is
    treated as that binding; other strings are used as CSS selectors verbatim.
    """

    def __init__(self, document: DocumentProvider, bindings: BindingSet | None = None) -> None:
        self.document = document
        self.bindings = bindings if bindings is not None else BindingSet()

    def selector_of(self, target: Target) -> str:
        if isinstance(target, SelectorBinding):
            return target.selector
        if target in self.bindings:
            return self.bindings[target].selector
        return target

    def _handle_at(self, selector: str, position: int) -> Any:
        if position == 0:
            handles = self.document.query(selector, single=True)
        else:
            handles = self.document.query(selector, single=False)
        if position >= len(handles):
            _fail(
                NotFoundError(
                    f"{selector!r} no longer has a match at position {position + 1}",
                    selector=selector,
                )
            )
        return handles[position]

    def resolve(self, target: Target, *, strict: bool = False) -> ResolvedElement:
        """Resolve ``target`` to its first match in document order.

        With ``strict=True`` more than one match raises
        :class:`AmbiguousMatchError` instead of picking the first.
        """

        selector = self.selector_of(target)
        handles = self.document.query(selector, single=not strict)
        _locator_event("resolve", selector=selector, matches=len(handles), strict=strict)
        if not handles:
            _fail(NotFoundError(f"No element matches {selector!r}", selector=selector))
        if strict and len(handles) > 1:
            _fail(
                AmbiguousMatchError(
                    f"{len(handles)} elements match {selector!r}; expected exactly one",
                    selector=selector,
                    matches=len(handles),
                )
            )
        return ResolvedElement(self, selector, 0)

    def field(self, name: str) -> ResolvedElement:
        """Resolve the binding registered under ``name``."""

        return self.resolve(self.bindings[name])

    def resolve_all(self, target: Target) -> ResolvedCollection:
        selector = self.selector_of(target)
        handles = self.document.query(selector, single=False)
        _locator_event("resolve_all", selector=selector, matches=len(handles))
        return ResolvedCollection(
            selector,
            tuple(ResolvedElement(self, selector, position) for position in range(len(handles))),
        )

    @staticmethod
    def text_of(elements: Iterable[ResolvedElement]) -> list[str]:
        return [element.text for element in elements]

    def nth(self, target: Target, index: int) -> str:
        """Return the text of ``selector:nth-child(index)``.

        ``index`` is 1-based, matching the CSS ordinal it is turned into.
        """

        selector = self.selector_of(target)
        if index < 1:
            _fail(
                NotFoundError(
                    f"Ordinal index must be 1 or greater, got {index}", selector=selector
                )
            )
        ordinal = f"{selector}:nth-child({index})"
        handles = self.document.query(ordinal, single=True)
        _locator_event("nth", selector=ordinal, index=index, matches=len(handles))
        if not handles:
            _fail(NotFoundError(f"No element matches {ordinal!r}", selector=ordinal))
        return self.document.text(handles[0])

    @staticmethod
    def attribute_of(element: ResolvedElement, name: str) -> Optional[str]:
        return element.get_attribute(name)


__all__ = ["ElementLocator", "ResolvedCollection", "ResolvedElement", "Target"]
