"""
Translation between the HTTP state resources and amplifier commands.

Resource names are the lower-cased protocol variables (``power``,
``speakera``, ...). Reads issue a query and interpret the reply; writes turn a
request value into a command, send it, and report the field the amplifier
echoed back.
"""
from __future__ import annotations

import logging
from typing import Optional

from nadapi.domain.amplifier import (
    MODEL,
    MUTE,
    POWER,
    SOURCE,
    SPEAKER_A,
    SPEAKER_B,
    VOLUME,
    Amplifier,
)
from nadapi.domain.sources import Source
from nadapi.errors import InvalidCommandError, ProtocolError, TransportError, VolumeDisabledError
from nadapi.parsing.commands import OP_DECREMENT, OP_INCREMENT, OP_QUERY, OP_SET, VALUELESS_OPERATORS, Command
from nadapi.parsing.replies import Reply, is_on
from nadapi.server_app.models import AmpValue, State

RESERVED_RESOURCE = "state"

BOOLEAN_VARIABLES: dict[str, str] = {
    "power": POWER,
    "mute": MUTE,
    "speakera": SPEAKER_A,
    "speakerb": SPEAKER_B,
}
STRING_VARIABLES: dict[str, str] = {
    "source": SOURCE,
    "model": MODEL,
}

# Resource name -> State attribute.
STATE_FIELDS: dict[str, str] = {
    "power": "power",
    "mute": "mute",
    "speakera": "speaker_a",
    "speakerb": "speaker_b",
    "source": "source",
    "model": "model",
    "volume": "volume",
}


class ApiError(Exception):
    """An error reported to the HTTP client as ``{"status": ..., "message": ...}``."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


class NotFoundError(ApiError):
    def __init__(self) -> None:
        super().__init__(404, "Not found")


def invalid_command(cmd: Command) -> ApiError:
    return ApiError(400, f"Invalid command: {cmd}")


def resolve_resource(name: str) -> str:
    resource = name.lower()
    if resource == RESERVED_RESOURCE:
        raise NotFoundError()
    return resource


def command_from_value(variable: str, text: str) -> Command:
    if text in VALUELESS_OPERATORS:
        return Command(variable=variable, operator=text)
    return Command(variable=variable, operator=OP_SET, value=text)


class StateBridge:
    def __init__(self, amplifier: Amplifier, logger: Optional[logging.Logger] = None) -> None:
        self.amplifier = amplifier
        self.logger = logger or logging.getLogger(__name__)

    def query_state(self, resource: str) -> State:
        if resource in BOOLEAN_VARIABLES:
            variable = BOOLEAN_VARIABLES[resource]
        elif resource in STRING_VARIABLES:
            variable = STRING_VARIABLES[resource]
        else:
            raise invalid_command(Command(variable=resource, operator=OP_QUERY))

        try:
            reply = self.amplifier.query(variable)
        except (TransportError, ProtocolError) as exc:
            raise ApiError(500, f"Failed to get {variable} state from amplifier") from exc
        if reply.variable.lower() != variable.lower():
            raise ApiError(500, f"Failed to get {variable} state from amplifier") from ProtocolError(
                f"Expected reply for {variable}, got {reply.variable}"
            )

        self.logger.info("query_ok", extra={"details": {"variable": variable, "value": reply.value}})
        if resource in BOOLEAN_VARIABLES:
            return State(**{STATE_FIELDS[resource]: is_on(reply.value)})
        return State(**{STATE_FIELDS[resource]: reply.value})

    def modify_state(self, resource: str, value: AmpValue) -> State:
        text = value.as_text()
        if resource == "volume":
            reply = self._step_volume(text)
        else:
            cmd = self._build_command(resource, text)
            reply = self._send(cmd)
        return self._state_from_reply(resource, reply)

    def _build_command(self, resource: str, text: str) -> Command:
        if resource in BOOLEAN_VARIABLES:
            cmd = command_from_value(BOOLEAN_VARIABLES[resource], text)
        elif resource == "source":
            cmd = command_from_value(SOURCE, text)
        else:
            raise invalid_command(command_from_value(resource, text))

        if not cmd.is_valid() or cmd.operator == OP_QUERY:
            raise invalid_command(cmd)
        if cmd.operator != OP_SET:
            return cmd

        if resource in BOOLEAN_VARIABLES:
            if text.lower() not in ("on", "off"):
                raise invalid_command(cmd)
            return Command(variable=cmd.variable, operator=OP_SET, value="On" if is_on(text) else "Off")
        try:
            source = Source.parse(text)
        except InvalidCommandError:
            raise invalid_command(cmd) from None
        return Command(variable=cmd.variable, operator=OP_SET, value=source.value)

    def _step_volume(self, text: str) -> Reply:
        if text not in (OP_INCREMENT, OP_DECREMENT):
            raise invalid_command(command_from_value(VOLUME, text))
        try:
            if text == OP_INCREMENT:
                return self._guarded(self.amplifier.volume_up)
            return self._guarded(self.amplifier.volume_down)
        except VolumeDisabledError as exc:
            raise ApiError(400, str(exc)) from None

    def _send(self, cmd: Command) -> Reply:
        try:
            return self._guarded(lambda: self.amplifier.send_command(cmd))
        except InvalidCommandError:
            raise invalid_command(cmd) from None
        except VolumeDisabledError as exc:
            raise ApiError(400, str(exc)) from None

    def _guarded(self, call) -> Reply:
        try:
            reply = call()
        except (TransportError, ProtocolError) as exc:
            raise ApiError(500, "Could not send command to amplifier") from exc
        self.logger.info(
            "command_ok",
            extra={"details": {"variable": reply.variable, "operator": reply.operator, "value": reply.value}},
        )
        return reply

    def _state_from_reply(self, resource: str, reply: Reply) -> State:
        replied = reply.variable.lower()
        if replied != resource:
            raise ApiError(500, "Could not send command to amplifier") from ProtocolError(
                f"Expected reply for {resource}, got {reply.variable}"
            )
        if replied in BOOLEAN_VARIABLES:
            return State(**{STATE_FIELDS[replied]: is_on(reply.value)})
        if replied == "volume":
            return State(volume=reply.volume)
        return State(**{STATE_FIELDS[replied]: reply.value})
