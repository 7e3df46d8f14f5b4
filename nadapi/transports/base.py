from __future__ import annotations

from abc import ABC, abstractmethod


class DeviceTransport(ABC):
    """A byte channel to the amplifier carrying one frame at a time."""

    @abstractmethod
    def send(self, data: bytes) -> None:
        """Write a complete frame; a partial write is an error."""

    @abstractmethod
    def read_until_terminator(self) -> bytes:
        """Block until a carriage return arrives and return everything read, terminator included."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying device. Safe to call more than once."""

    def __enter__(self) -> DeviceTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
