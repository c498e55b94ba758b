import io

import pytest

from bonobo.log import Logger, OutputTarget, Type
from bonobo.log_view import LogEntry, LogView


def texts(view, pattern=None):
    return [entry.text for entry in view.entries(pattern)]


def test_logger_feeds_view(tmp_path):
    logger = Logger(tmp_path / "log.txt", io.StringIO(), io.StringIO())
    logger.set_output_targets(OutputTarget.CUSTOM)
    view = LogView(logger)
    logger.report(Type.WARNING, "hot")
    assert list(view.entries()) == [LogEntry(Type.WARNING, "[Unknown location]\nWarning: hot\n")]


def test_ring_keeps_newest_in_order():
    view = LogView(rows=3, width=32)
    for i in range(5):
        view.feed(Type.INFO, f"m{i}")
    assert texts(view) == ["m2", "m3", "m4"]


def test_width_truncates_text():
    view = LogView(rows=4, width=5)
    view.feed(Type.INFO, "abcdefgh")
    assert texts(view) == ["abcd"]


def test_clear_removes_everything():
    view = LogView(rows=4)
    view.feed(Type.INFO, "a")
    view.scroll_to_bottom = False
    view.clear()
    assert texts(view) == []
    assert view.scroll_to_bottom is True


def test_empty_message_not_listed():
    view = LogView(rows=4)
    view.feed(Type.INFO, "")
    view.feed(Type.INFO, "b")
    assert texts(view) == ["b"]


def test_filter_include_and_exclude():
    view = LogView(rows=8)
    for message in ["Alpha one", "beta two", "alpha three"]:
        view.feed(Type.INFO, message)
    assert texts(view, "ALPHA") == ["Alpha one", "alpha three"]
    assert texts(view, "alpha,-three") == ["Alpha one"]
    assert texts(view, "-beta") == ["Alpha one", "alpha three"]
    assert texts(view, " , ") == ["Alpha one", "beta two", "alpha three"]


def test_colors():
    view = LogView()
    assert view.color_for(Type.WARNING) == (0.7, 0.4, 0.0, 1.0)
    assert view.color_for(Type.ERROR) == view.color_for(Type.PARAM)
    assert view.color_for(Type.INFO) == (1.0, 1.0, 1.0, 1.0)


def test_feed_requests_scroll():
    view = LogView()
    view.scroll_to_bottom = False
    view.feed(Type.INFO, "x")
    assert view.scroll_to_bottom is True


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        LogView(rows=0)