"""
Reply decoder for the NAD text protocol.

The amplifier echoes the variable and operator it executed followed by the
resulting value, framed exactly like a command: ``Power=On\\r``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from nadapi.errors import ProtocolError
from nadapi.parsing.commands.builder import OPERATORS, TERMINATOR

VOLUME_VARIABLE = "Volume"


@dataclass(frozen=True)
class Reply:
    """
    A decoded amplifier reply.

    Attributes:
        variable: The variable the amplifier reports on.
        operator: The operator character found in the reply.
        value: Everything after the operator character.
        volume: The resulting volume level, only set for volume replies.
    """
    variable: str
    operator: str
    value: str = ""
    volume: Optional[str] = None


def strip_terminator(data: bytes) -> bytes:
    return data.rstrip(TERMINATOR)


def parse_reply(data: bytes) -> Reply:
    """
    Decode a reply frame.

    Args:
        data: Raw bytes read from the serial link, with or without the
            trailing carriage return.

    Returns:
        The parsed ``Reply``.

    Raises:
        ProtocolError: If the frame is not ASCII or has no operator character
            preceded by a variable name.
    """
    try:
        text = strip_terminator(data).decode("ascii")
    except UnicodeDecodeError as exc:
        raise ProtocolError(f"Reply is not ASCII: {data!r}") from exc

    index = next((i for i, ch in enumerate(text) if ch in OPERATORS), -1)
    if index <= 0:
        raise ProtocolError(f"Unrecognized reply: {text!r}")

    variable = text[:index]
    operator = text[index]
    value = text[index + 1:]

    volume = None
    if variable.lower() == VOLUME_VARIABLE.lower():
        volume = value or operator
    return Reply(variable=variable, operator=operator, value=value, volume=volume)


def is_on(value: str) -> bool:
    return value.lower() == "on"
