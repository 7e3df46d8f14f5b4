"""
Input sources selectable on NAD stereo amplifiers.

The protocol accepts a closed set of source names. Lookups are case-insensitive
and always resolve to the spelling the amplifier expects on the wire.
"""
from __future__ import annotations

from enum import Enum
from typing import Union

from nadapi.errors import InvalidCommandError


class Source(str, Enum):
    """Source names accepted by ``Source=<name>``."""
    CD = "CD"
    TUNER = "Tuner"
    VIDEO = "Video"
    DISC = "Disc"
    IPOD = "Ipod"
    TAPE2 = "Tape2"
    AUX = "Aux"

    @classmethod
    def parse(cls, value: Union[Source, str]) -> Source:
        """
        Resolve a source by name.

        Args:
            value: A ``Source`` member or its name in any letter case.

        Returns:
            The matching ``Source`` member.

        Raises:
            InvalidCommandError: If the name is not a known source.
        """
        if isinstance(value, cls):
            return value
        wanted = str(value).strip().lower()
        for source in cls:
            if source.value.lower() == wanted:
                return source
        raise InvalidCommandError(f"Unknown source: {value}")


SOURCE_NAMES: tuple[str, ...] = tuple(source.value for source in Source)
