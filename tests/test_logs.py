import pytest

from katas.logs import LogLevel, error, info, log, warn


def test_pinned_format():
    assert log(LogLevel.DEBUG, "starting up") == "[DEBUG]: starting up"


@pytest.mark.parametrize("level", list(LogLevel))
def test_log_prefixes_level(level):
    line = log(level, "message")
    assert line.startswith(f"[{level.value}]: ")
    assert line.endswith("message")


@pytest.mark.parametrize("message", ["", "disk full", "a: b"])
def test_shortcuts_match_log(message):
    assert info(message) == log(LogLevel.INFO, message)
    assert warn(message) == log(LogLevel.WARNING, message)
    assert error(message) == log(LogLevel.ERROR, message)


def test_level_names():
    lines = [log(level, "x") for level in LogLevel]
    assert lines == ["[DEBUG]: x", "[INFO]: x", "[WARNING]: x", "[ERROR]: x"]