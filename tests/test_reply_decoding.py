"""Tests for reply frame decoding."""
import pytest

from nadapi.errors import ProtocolError
from nadapi.parsing.replies import Reply, is_on, parse_reply, strip_terminator


def test_parse_assignment_reply():
    reply = parse_reply(b"Power=On\r")
    assert reply == Reply(variable="Power", operator="=", value="On")
    assert reply.volume is None


def test_parse_without_terminator():
    assert parse_reply(b"Mute=Off").value == "Off"


def test_value_may_contain_operator_characters():
    reply = parse_reply(b"Model=C356-BEE\r")
    assert reply.variable == "Model"
    assert reply.value == "C356-BEE"


def test_volume_reply_carries_level():
    reply = parse_reply(b"Volume=-48\r")
    assert reply.operator == "="
    assert reply.value == "-48"
    assert reply.volume == "-48"


def test_volume_step_echo_carries_operator():
    reply = parse_reply(b"Volume+\r")
    assert reply.operator == "+"
    assert reply.value == ""
    assert reply.volume == "+"


@pytest.mark.parametrize("data", [b"\r", b"", b"PowerOn\r", b"=On\r", b"?\r"])
def test_unparseable_reply_raises(data):
    with pytest.raises(ProtocolError):
        parse_reply(data)


def test_non_ascii_reply_raises():
    with pytest.raises(ProtocolError):
        parse_reply(b"Power=\xff\r")


def test_strip_terminator():
    assert strip_terminator(b"Power=On\r") == b"Power=On"
    assert strip_terminator(b"Power=On") == b"Power=On"


@pytest.mark.parametrize("value", ["on", "On", "ON", "oN"])
def test_is_on_true(value):
    assert is_on(value) is True


@pytest.mark.parametrize("value", ["off", "Off", "", "1", "true", " on"])
def test_is_on_false(value):
    assert is_on(value) is False
