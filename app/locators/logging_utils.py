from __future__ import annotations

from typing import Any

from .utils import log_line


def _locator_event(label: str = "", *, phase: str | None = None, **fields: Any) -> None:
    """Emit a structured locator log line.

    ``phase`` may be used as a keyword alias for the label. When both ``label``
    and ``phase`` are provided, ``phase`` is emitted as part of the payload so
    the caller still captures the stage that produced the event.
    """

    try:
        phase_label = label or (phase or "")
        if phase and label:
            fields.setdefault("phase", phase)
        payload = ", ".join(f"{k}={repr(v)}" for k, v in sorted(fields.items()))
        log_line(f"[LOCATOR][{phase_label.upper()}] {payload}")
    except Exception:
        # Never let logging break a lookup.
        return


__all__ = ["_locator_event"]
