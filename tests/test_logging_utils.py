import io

from app.locators import config, logging_utils, utils


def test_locator_event_label_and_phase(monkeypatch):
    events: list[str] = []
    monkeypatch.setattr(logging_utils, "log_line", lambda msg: events.append(msg))

    logging_utils._locator_event("state", phase="config", kind="summary")

    assert events
    line = events[-1]
    assert line.startswith("[LOCATOR][STATE]")
    assert "phase='config'" in line
    assert "kind='summary'" in line


def test_locator_event_never_raises(monkeypatch):
    def boom(msg):
        raise OSError("disk full")

    monkeypatch.setattr(logging_utils, "log_line", boom)

    logging_utils._locator_event("resolve", selector="#x")


def test_log_line_writes_to_log_file():
    utils.log_line("hello from the locator")

    assert "hello from the locator" in config.LOG_FILE.read_text(encoding="utf-8")


def test_setup_session_logger_rotates_file_and_stream():
    stream = io.StringIO()

    path = utils.setup_session_logger(stream=stream)
    utils.log_line("after rotation")

    assert path.name.startswith("locate_")
    assert "after rotation" in path.read_text(encoding="utf-8")
    assert "after rotation" not in config.LOG_FILE.read_text(encoding="utf-8")
    assert "after rotation" in stream.getvalue()


def test_normalise_text():
    assert utils.normalise_text("  125\n  ") == "125"
    assert utils.normalise_text("Order\n   details") == "Order details"
    assert utils.normalise_text(None) == ""
