from saffronkit.log import Level
from saffronkit.log_view import LogView


def test_new_view_is_empty():
    view = LogView()
    assert view.lines() == []
    assert view.text == ""


def test_entries_keep_order_and_levels():
    view = LogView()
    view.add_entry("info log message", Level.INFO)
    view.add_entry("error log message", Level.ERROR)
    lines = view.lines()
    assert [line.text for line in lines] == ["info log message", "error log message"]
    assert [line.level for line in lines] == [Level.INFO, Level.ERROR]
    assert view.text == "info log message\nerror log message\n"


def test_labels_follow_levels():
    view = LogView()
    for level in (Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR, Level.FATAL):
        view.add_entry("m", level)
    assert [line.label for line in view.lines()] == [
        "[DEBUG]  ",
        "[INFO]   ",
        "[WARN]   ",
        "[ERROR]  ",
        "[FATAL]  ",
    ]


def test_panic_levels_share_fatal_style():
    view = LogView()
    view.add_entry("a", Level.PANIC)
    view.add_entry("b", Level.DPANIC)
    view.add_entry("c", Level.FATAL)
    styles = {(line.label, line.color) for line in view.lines()}
    assert len(styles) == 1


def test_error_color():
    view = LogView()
    view.add_entry("bad", Level.ERROR)
    assert view.lines()[0].color == (0.85, 0.33, 0.31, 1.0)


def test_unknown_level_label():
    view = LogView()
    view.add_entry("odd", 42)
    assert view.lines()[0].label == "[?]      "


def test_multiline_message_splits_with_same_level():
    view = LogView()
    view.add_entry("first\nsecond", Level.WARN)
    lines = view.lines()
    assert [line.text for line in lines] == ["first", "second"]
    assert all(line.level is Level.WARN for line in lines)


def test_clear_removes_everything():
    view = LogView()
    view.add_entry("one", Level.INFO)
    view.clear()
    assert len(view) == 0
    view.add_entry("two", Level.DEBUG)
    assert [(line.text, line.level) for line in view.lines()] == [("two", Level.DEBUG)]