"""
Command builder for the NAD RS-232 text protocol.

A command is written as ``<Variable><Operator><Value>`` followed by a single
carriage return, e.g. ``Power=On\\r`` or ``Volume+\\r``.
"""
from __future__ import annotations

from dataclasses import dataclass

from nadapi.errors import InvalidCommandError

TERMINATOR = b"\r"

OP_SET = "="
OP_INCREMENT = "+"
OP_DECREMENT = "-"
OP_QUERY = "?"

# Operators that never carry a value.
VALUELESS_OPERATORS: frozenset[str] = frozenset({OP_INCREMENT, OP_DECREMENT, OP_QUERY})
OPERATORS: frozenset[str] = VALUELESS_OPERATORS | {OP_SET}


@dataclass(frozen=True)
class Command:
    """
    A single protocol operation.

    Attributes:
        variable: The amplifier variable, e.g. ``Power`` or ``Source``.
        operator: One of ``=``, ``+``, ``-`` or ``?``.
        value: The value for ``=``; must be empty for every other operator.
    """
    variable: str
    operator: str
    value: str = ""

    def is_valid(self) -> bool:
        return validate(self)

    def __str__(self) -> str:
        return f"{self.variable}{self.operator}{self.value}"


def validate(cmd: Command) -> bool:
    if cmd.operator not in OPERATORS:
        return False
    if cmd.operator == OP_SET:
        return cmd.value != ""
    return cmd.value == ""


def render(cmd: Command) -> bytes:
    """
    Render a command as a wire frame.

    Args:
        cmd: The command to render.

    Returns:
        The ASCII frame including the trailing carriage return.

    Raises:
        InvalidCommandError: If the command is not valid or not ASCII.
    """
    if not validate(cmd):
        raise InvalidCommandError(f"Invalid command: {cmd}")
    try:
        return str(cmd).encode("ascii") + TERMINATOR
    except UnicodeEncodeError as exc:
        raise InvalidCommandError(f"Invalid command: {cmd}") from exc


def query(variable: str) -> Command:
    return Command(variable=variable, operator=OP_QUERY)


def assign(variable: str, value: str) -> Command:
    return Command(variable=variable, operator=OP_SET, value=value)


def switch(variable: str, enable: bool) -> Command:
    return assign(variable, "On" if enable else "Off")


def step(variable: str, up: bool) -> Command:
    return Command(variable=variable, operator=OP_INCREMENT if up else OP_DECREMENT)
