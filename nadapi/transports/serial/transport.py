from __future__ import annotations

import logging
from typing import Optional

import serial

from nadapi.errors import TransportError
from nadapi.parsing.commands import TERMINATOR
from nadapi.transports.base import DeviceTransport

logger = logging.getLogger(__name__)

# From RS-232 Protocol for NAD Products v2.02: 115200 bps, 8 data bits,
# 1 stop bit, no parity, no flow control.
BAUD_RATE = 115200
BYTE_SIZE = serial.EIGHTBITS
PARITY = serial.PARITY_NONE
STOP_BITS = serial.STOPBITS_ONE


class SerialTransport(DeviceTransport):
    def __init__(self, device: str) -> None:
        self.device = device
        self._port: Optional[serial.Serial] = None
        try:
            self._port = serial.Serial(
                port=device,
                baudrate=BAUD_RATE,
                bytesize=BYTE_SIZE,
                parity=PARITY,
                stopbits=STOP_BITS,
                xonxoff=False,
                rtscts=False,
                dsrdtr=False,
                timeout=None,
            )
        except serial.SerialException as exc:
            raise TransportError(f"Could not open serial device {device}: {exc}") from exc
        logger.debug("Opened %s at %d bps", device, BAUD_RATE)

    @property
    def is_open(self) -> bool:
        return self._port is not None and self._port.is_open

    def _require_port(self) -> serial.Serial:
        if not self.is_open:
            raise TransportError(f"Serial device {self.device} is not open")
        return self._port

    def send(self, data: bytes) -> None:
        port = self._require_port()
        try:
            written = port.write(data)
        except serial.SerialException as exc:
            raise TransportError(f"Write to {self.device} failed: {exc}") from exc
        if written != len(data):
            raise TransportError(f"Short write to {self.device}: {written} of {len(data)} bytes")

    def read_until_terminator(self) -> bytes:
        port = self._require_port()
        try:
            data = port.read_until(TERMINATOR)
        except serial.SerialException as exc:
            raise TransportError(f"Read from {self.device} failed: {exc}") from exc
        if not data.endswith(TERMINATOR):
            raise TransportError(f"Read from {self.device} ended before terminator: {data!r}")
        return data

    def close(self) -> None:
        if self._port is not None:
            self._port.close()
            self._port = None
