from app.locators.locate_cli import main

if __name__ == "__main__":
    # Same as ``python -m app.locators.locate_cli``; defaults to the bundled
    # practice page and the BeautifulSoup backend.
    raise SystemExit(main())
