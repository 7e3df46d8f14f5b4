"""Transport layer for the amplifier's serial link."""
from nadapi.transports.base import DeviceTransport
from nadapi.transports.serial import SerialTransport

__all__ = ["DeviceTransport", "SerialTransport"]
