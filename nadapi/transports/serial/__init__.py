from nadapi.transports.serial.transport import BAUD_RATE, SerialTransport

__all__ = ["BAUD_RATE", "SerialTransport"]
