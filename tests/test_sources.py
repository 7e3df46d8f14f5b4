"""Tests for the source enumeration."""
import pytest

from nadapi.domain import SOURCE_NAMES, Source
from nadapi.errors import InvalidCommandError


def test_source_names():
    assert SOURCE_NAMES == ("CD", "Tuner", "Video", "Disc", "Ipod", "Tape2", "Aux")


@pytest.mark.parametrize("name,expected", [("cd", Source.CD), ("TUNER", Source.TUNER), ("tape2", Source.TAPE2), ("Aux", Source.AUX)])
def test_parse_is_case_insensitive(name, expected):
    assert Source.parse(name) is expected


def test_parse_member_passthrough():
    assert Source.parse(Source.IPOD) is Source.IPOD


@pytest.mark.parametrize("name", ["Phono", "", "Tape1", "CD1"])
def test_parse_unknown_source_raises(name):
    with pytest.raises(InvalidCommandError):
        Source.parse(name)
