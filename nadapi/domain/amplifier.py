"""
Amplifier client composing the command codec with a device transport.

Every call performs one write followed by one blocking read while holding the
client's lock, so a single connection never has more than one request in
flight.
"""
from __future__ import annotations

import logging
import threading
from typing import Union

from nadapi.errors import InvalidCommandError, VolumeDisabledError
from nadapi.parsing.commands import (
    OP_QUERY,
    TERMINATOR,
    Command,
    assign,
    query,
    render,
    step,
    switch,
    validate,
)
from nadapi.parsing.replies import Reply, parse_reply, strip_terminator
from nadapi.domain.sources import Source
from nadapi.transports.base import DeviceTransport

logger = logging.getLogger(__name__)

POWER = "Power"
MUTE = "Mute"
SPEAKER_A = "SpeakerA"
SPEAKER_B = "SpeakerB"
TAPE1 = "Tape1"
SOURCE = "Source"
MODEL = "Model"
VOLUME = "Volume"


class Amplifier:
    def __init__(self, transport: DeviceTransport, enable_volume: bool = False) -> None:
        self.transport = transport
        self.enable_volume = enable_volume
        self._lock = threading.Lock()

    def _exchange(self, frame: bytes) -> bytes:
        with self._lock:
            self.transport.send(frame)
            data = self.transport.read_until_terminator()
        logger.debug("Exchanged %r -> %r", frame, data)
        return data

    def _check_volume_allowed(self) -> None:
        if not self.enable_volume:
            raise VolumeDisabledError("Volume adjustment is disabled")

    def send_command(self, cmd: Command) -> Reply:
        """
        Send a command and wait for the amplifier's reply.

        Raises:
            InvalidCommandError: If the command is not valid.
            VolumeDisabledError: If the command changes volume while disabled.
            TransportError: If the serial link fails.
            ProtocolError: If the reply cannot be parsed.
        """
        if not validate(cmd):
            raise InvalidCommandError(f"Invalid command: {cmd}")
        if cmd.variable.lower() == VOLUME.lower() and cmd.operator != OP_QUERY:
            self._check_volume_allowed()
        return parse_reply(self._exchange(render(cmd)))

    def send_raw(self, text: str) -> bytes:
        """Send a hand-written command, bypassing validation, and return the reply payload."""
        try:
            frame = text.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidCommandError(f"Invalid command: {text}") from exc
        if not frame.endswith(TERMINATOR):
            frame += TERMINATOR
        return strip_terminator(self._exchange(frame))

    def query(self, variable: str) -> Reply:
        return self.send_command(query(variable))

    def enable(self, variable: str, on: bool) -> Reply:
        return self.send_command(switch(variable, on))

    def power(self, on: bool) -> Reply:
        return self.enable(POWER, on)

    def mute(self, on: bool) -> Reply:
        return self.enable(MUTE, on)

    def speaker_a(self, on: bool) -> Reply:
        return self.enable(SPEAKER_A, on)

    def speaker_b(self, on: bool) -> Reply:
        return self.enable(SPEAKER_B, on)

    def tape1(self, on: bool) -> Reply:
        return self.enable(TAPE1, on)

    def source(self, source: Union[Source, str]) -> Reply:
        return self.send_command(assign(SOURCE, Source.parse(source).value))

    def model(self) -> str:
        return self.query(MODEL).value

    def volume_up(self) -> Reply:
        self._check_volume_allowed()
        return self.send_command(step(VOLUME, up=True))

    def volume_down(self) -> Reply:
        self._check_volume_allowed()
        return self.send_command(step(VOLUME, up=False))

    def close(self) -> None:
        self.transport.close()
