"""Exceptions raised by the locator layer."""
from __future__ import annotations

from .error_codes import ErrorCode


class LocatorError(Exception):
    """Base class for every lookup failure."""

    error_code: str = ErrorCode.INTERNAL

    def __init__(self, message: str, *, selector: str | None = None) -> None:
        super().__init__(message)
        self.selector = selector

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class NotFoundError(LocatorError):
    """No node matched a lookup that needs one."""

    error_code = ErrorCode.NOT_FOUND


class AmbiguousMatchError(LocatorError):
    """More than one node matched a strict single-element lookup."""

    error_code = ErrorCode.AMBIGUOUS_MATCH

    def __init__(self, message: str, *, selector: str | None = None, matches: int = 0) -> None:
        super().__init__(message, selector=selector)
        self.matches = matches


class InvalidSelectorError(LocatorError):
    """The selector expression could not be parsed."""

    error_code = ErrorCode.INVALID_SELECTOR


class UnknownFieldError(LocatorError, KeyError):
    """A field name has no binding."""

    error_code = ErrorCode.UNKNOWN_FIELD

    def __init__(self, name: str) -> None:
        super().__init__(f"No selector bound to field {name!r}")
        self.name = name


__all__ = [
    "AmbiguousMatchError",
    "InvalidSelectorError",
    "LocatorError",
    "NotFoundError",
    "UnknownFieldError",
]
