"""
Exception hierarchy shared by the codec, transport and amplifier layers.
"""
from __future__ import annotations


class NadError(Exception):
    pass


class InvalidCommandError(NadError, ValueError):
    """Raised when a command would violate the wire syntax of the protocol."""


class VolumeDisabledError(NadError, PermissionError):
    """Raised when a volume change is requested while volume control is off."""


class ProtocolError(NadError, ValueError):
    """Raised when a reply from the amplifier cannot be interpreted."""


class TransportError(NadError, ConnectionError):
    """Raised when the serial link fails to write or read a full frame."""
