from __future__ import annotations

"""Error code taxonomy for locator failures.

Codes travel on every ``LocatorError`` and in the structured ``[LOCATOR]`` log
lines so a failed lookup can be explained without a stack trace.
"""


class ErrorCode:
    NOT_FOUND = "not_found"
    AMBIGUOUS_MATCH = "ambiguous_match"
    INVALID_SELECTOR = "invalid_selector"
    UNKNOWN_FIELD = "unknown_field"
    INTERNAL = "internal_error"


__all__ = ["ErrorCode"]
