from collections import deque

import pytest

from nadapi.domain import Amplifier
from nadapi.server_app import ServerSettings
from nadapi.transports.base import DeviceTransport


class FakeTransport(DeviceTransport):
    """In-memory transport: records written frames and plays back queued replies."""

    def __init__(self, *replies):
        self.sent = []
        self.replies = deque(replies)
        self.send_error = None
        self.closed = False

    def queue(self, *replies):
        self.replies.extend(replies)

    def send(self, data: bytes) -> None:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(data)

    def read_until_terminator(self) -> bytes:
        reply = self.replies.popleft()
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def amplifier(transport):
    return Amplifier(transport)


@pytest.fixture
def settings():
    return ServerSettings(device=None, enable_volume=False, static_dir=None)
