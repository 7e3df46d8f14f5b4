"""
This package defines the amplifier domain: the client that speaks to the
device and the vocabulary of sources it accepts.
"""
from nadapi.domain.amplifier import Amplifier
from nadapi.domain.factory import create_serial_amplifier
from nadapi.domain.sources import SOURCE_NAMES, Source

__all__ = ["Amplifier", "SOURCE_NAMES", "Source", "create_serial_amplifier"]
