import json
import logging

import pytest

from skyeye.cli import TRACE, EnumOption, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_enum_default_is_value_and_option():
    option = EnumOption("voice", "feminine", "masculine")
    assert str(option) == "feminine"
    assert option.options == ["feminine", "masculine"]


def test_enum_set_valid():
    option = EnumOption("voice", "feminine", "masculine")
    option.set("masculine")
    assert str(option) == "masculine"


def test_enum_set_invalid_raises_and_keeps_value():
    option = EnumOption("voice", "feminine", "masculine")
    with pytest.raises(ValueError, match="invalid value robot"):
        option.set("robot")
    assert str(option) == "feminine"


def test_enum_without_default():
    option = EnumOption("format", "", "json", "pretty")
    assert str(option) == ""
    assert option.options == ["json", "pretty"]
    option.set("pretty")
    assert str(option) == "pretty"


def test_enum_without_default_rejects_empty():
    option = EnumOption("format", "", "json", "pretty")
    with pytest.raises(ValueError):
        option.set("")


def test_enum_keeps_type_name():
    option = EnumOption("coalition", "blue", "red")
    assert option.type_name == "coalition"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("error", logging.ERROR),
        ("WARN", logging.WARNING),
        ("info", logging.INFO),
        ("Debug", logging.DEBUG),
        ("trace", TRACE),
        ("nonsense", logging.INFO),
    ],
)
def test_setup_logging_levels(restore_root_logger, name, expected):
    assert setup_logging(name, "json") == expected
    assert logging.getLogger().level == expected


def test_setup_logging_json_output(restore_root_logger, capsys):
    setup_logging("debug", "json")
    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    entry = json.loads(lines[-1])
    assert entry["message"] == "log level set"
    assert entry["level"] == "info"
    assert entry["new_level"] == "debug"


def test_setup_logging_pretty_output(restore_root_logger, capsys):
    setup_logging("info", "PRETTY")
    err = capsys.readouterr().err
    assert "log level set" in err
    assert not err.lstrip().startswith("{")


def test_setup_logging_replaces_own_handler(restore_root_logger):
    root = logging.getLogger()
    first = setup_logging("info", "json")
    count = len(root.handlers)
    second = setup_logging("debug", "pretty")
    assert first == logging.INFO
    assert second == logging.DEBUG
    assert len(root.handlers) == count