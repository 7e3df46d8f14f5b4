"""Tests for command validation and frame rendering."""
import pytest

from nadapi.errors import InvalidCommandError
from nadapi.parsing.commands import (
    Command,
    TERMINATOR,
    assign,
    query,
    render,
    step,
    switch,
    validate,
)
from nadapi.parsing.replies import parse_reply


@pytest.mark.parametrize(
    "operator,value,expected",
    [
        ("=", "On", True),
        ("=", "", False),
        ("+", "", True),
        ("+", "1", False),
        ("-", "", True),
        ("-", "x", False),
        ("?", "", True),
        ("?", "On", False),
        ("!", "", False),
        ("!", "On", False),
        ("", "", False),
        ("==", "On", False),
    ],
)
def test_validate(operator, value, expected):
    cmd = Command(variable="Power", operator=operator, value=value)
    assert validate(cmd) is expected
    assert cmd.is_valid() is expected


def test_render_assignment():
    assert render(Command("Power", "=", "On")) == b"Power=On\r"


def test_render_valueless_operators():
    assert render(Command("Volume", "+")) == b"Volume+\r"
    assert render(Command("Volume", "-")) == b"Volume-\r"
    assert render(Command("Model", "?")) == b"Model?\r"


def test_render_ends_with_single_terminator():
    frame = render(Command("Source", "=", "CD"))
    assert frame.endswith(TERMINATOR)
    assert frame.count(TERMINATOR) == 1


def test_render_invalid_command_raises():
    with pytest.raises(InvalidCommandError):
        render(Command("Power", "="))
    with pytest.raises(InvalidCommandError):
        render(Command("Power", "?", "On"))


def test_render_non_ascii_raises():
    with pytest.raises(InvalidCommandError):
        render(Command("Source", "=", "Ipöd"))


def test_command_is_immutable():
    cmd = Command("Power", "=", "On")
    with pytest.raises(AttributeError):
        cmd.value = "Off"


def test_str_matches_wire_text():
    assert str(Command("Mute", "=", "Off")) == "Mute=Off"
    assert str(Command("Volume", "+")) == "Volume+"


def test_constructors():
    assert query("Power") == Command("Power", "?")
    assert assign("Source", "Tuner") == Command("Source", "=", "Tuner")
    assert switch("Mute", True) == Command("Mute", "=", "On")
    assert switch("Mute", False) == Command("Mute", "=", "Off")
    assert step("Volume", up=True) == Command("Volume", "+")
    assert step("Volume", up=False) == Command("Volume", "-")


@pytest.mark.parametrize("cmd", [Command("Power", "=", "On"), Command("Model", "?"), Command("Speaker", "+")])
def test_echo_recovers_variable_and_operator(cmd):
    reply = parse_reply(render(cmd))
    assert reply.variable == cmd.variable
    assert reply.operator == cmd.operator
