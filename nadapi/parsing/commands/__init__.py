"""
Command construction for the NAD text protocol.

This sub-package validates commands and renders them into carriage-return
terminated ASCII frames.
"""
from nadapi.parsing.commands.builder import (
    Command,
    OPERATORS,
    OP_DECREMENT,
    OP_INCREMENT,
    OP_QUERY,
    OP_SET,
    TERMINATOR,
    VALUELESS_OPERATORS,
    assign,
    query,
    render,
    step,
    switch,
    validate,
)

__all__ = [
    "Command",
    "OPERATORS",
    "OP_DECREMENT",
    "OP_INCREMENT",
    "OP_QUERY",
    "OP_SET",
    "TERMINATOR",
    "VALUELESS_OPERATORS",
    "assign",
    "query",
    "render",
    "step",
    "switch",
    "validate",
]
