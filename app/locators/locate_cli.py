from __future__ import annotations

"""CLI for trying selectors against the practice page (or any other page)."""

import argparse
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

from . import config
from .config_validation import validate_runtime_config
from .documents import DocumentProvider, SoupDocument
from .exceptions import LocatorError
from .locator import ElementLocator
from .selectors_css_tutorial import CSS_TUTORIAL_BINDINGS
from .utils import setup_session_logger

ABSENT = "<absent>"


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser for the locate CLI."""

    parser = argparse.ArgumentParser(
        description="Resolve a CSS selector and print what it matches.",
    )
    parser.add_argument(
        "selector",
        nargs="?",
        help="CSS selector to evaluate.",
    )
    parser.add_argument(
        "--field",
        help="Use the selector bound to this practice-page field instead.",
    )
    parser.add_argument(
        "--page",
        help="Path or URL of the page to query (defaults to the bundled practice page).",
    )
    parser.add_argument(
        "--backend",
        choices=config.BACKENDS,
        default=config.BACKEND,
        help="Document provider to query with.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--all",
        action="store_true",
        help="Print the text of every match in document order.",
    )
    mode.add_argument(
        "--nth",
        type=int,
        metavar="N",
        help="Print the text of the N-th (1-based) child match.",
    )
    mode.add_argument(
        "--attr",
        metavar="NAME",
        help=f"Print an attribute of the first match ({ABSENT} when missing).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a single-element lookup matches more than one node.",
    )
    return parser


def _page_url(page: str | None) -> str:
    if not page:
        return config.default_page_url()
    if "://" in page:
        return page
    return Path(page).resolve().as_uri()


@contextmanager
def _open_document(backend: str, url: str) -> Iterator[DocumentProvider]:
    if backend == "selenium":
        from .selenium_client import selenium_document

        with selenium_document(url) as document:
            yield document
    elif backend == "playwright":
        from .playwright_client import playwright_document

        with playwright_document(url) as document:
            yield document
    else:
        document = SoupDocument()
        document.navigate(url)
        yield document


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the locate CLI."""

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if not args.selector and not args.field:
        parser.error("You must provide a SELECTOR or --field")
    if args.selector and args.field:
        parser.error("SELECTOR and --field are mutually exclusive")
    if args.strict and (args.all or args.nth is not None):
        parser.error("--strict only applies to single-element lookups")

    # Results own stdout; log lines go to stderr and the session log file.
    setup_session_logger(stream=sys.stderr)

    try:
        validate_runtime_config("cli", backend=args.backend)
    except ValueError as exc:
        parser.error(str(exc))

    url = _page_url(args.page)
    with _open_document(args.backend, url) as document:
        locator = ElementLocator(document, CSS_TUTORIAL_BINDINGS)
        try:
            target = locator.bindings[args.field] if args.field else args.selector
            if args.all:
                lines = locator.text_of(locator.resolve_all(target))
            elif args.nth is not None:
                lines = [locator.nth(target, args.nth)]
            elif args.attr:
                element = locator.resolve(target, strict=args.strict)
                value = locator.attribute_of(element, args.attr)
                lines = [ABSENT if value is None else value]
            else:
                lines = [locator.resolve(target, strict=args.strict).text]
        except LocatorError as exc:
            parser.error(f"{exc.error_code}: {exc}")

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
