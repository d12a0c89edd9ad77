from __future__ import annotations

from pathlib import Path

import pytest

from app.locators import config, utils
from app.locators.documents import SoupDocument
from app.locators.page import CssTutorialPage


@pytest.fixture(autouse=True)
def _configure_temp_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    data_dir = tmp_path / "data"
    monkeypatch.setattr(config, "DATA_DIR", data_dir)
    monkeypatch.setattr(config, "LOG_DIR", data_dir / "logs")
    monkeypatch.setattr(config, "LOG_FILE", data_dir / "logs" / "latest.log")
    utils._configure_logger(config.LOG_FILE)


@pytest.fixture
def practice_document() -> SoupDocument:
    return SoupDocument.from_path(config.DEFAULT_PAGE_PATH)


@pytest.fixture
def on_the_page() -> CssTutorialPage:
    return CssTutorialPage(SoupDocument()).open()
