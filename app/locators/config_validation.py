from __future__ import annotations

from typing import Literal

from . import config
from .logging_utils import _locator_event
from .utils import log_line

Entrypoint = Literal["cli", "tests"]


def _raise_config_error(message: str, *, entrypoint: Entrypoint, error: str) -> None:
    _locator_event(
        "error",
        phase="config",
        context="runtime_validation",
        error=error,
        entrypoint=entrypoint,
    )
    log_line(f"[CONFIG] {message} (entrypoint={entrypoint})")
    raise ValueError(message)


def validate_runtime_config(entrypoint: Entrypoint, *, backend: str | None = None) -> None:
    """Validate runtime configuration for the given entrypoint.

    Raises ``ValueError`` when a blocking misconfiguration is detected.
    """

    selected = (backend or config.BACKEND).strip().lower()
    if selected not in config.BACKENDS:
        _raise_config_error(
            f"Unknown backend {selected!r}; expected one of {', '.join(config.BACKENDS)}.",
            entrypoint=entrypoint,
            error="unknown_backend",
        )

    if not config.DEFAULT_PAGE_PATH.is_file():
        _raise_config_error(
            f"Practice page not found at {config.DEFAULT_PAGE_PATH}.",
            entrypoint=entrypoint,
            error="missing_site",
        )


__all__ = ["validate_runtime_config", "Entrypoint"]
