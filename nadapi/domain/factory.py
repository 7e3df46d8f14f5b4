from __future__ import annotations

from nadapi.domain.amplifier import Amplifier
from nadapi.transports.serial import SerialTransport


def create_serial_amplifier(device: str, enable_volume: bool = False) -> Amplifier:
    transport = SerialTransport(device)
    return Amplifier(transport=transport, enable_volume=enable_volume)
