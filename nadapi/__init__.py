from nadapi.domain import Amplifier, Source, create_serial_amplifier
from nadapi.errors import InvalidCommandError, NadError, ProtocolError, TransportError, VolumeDisabledError
from nadapi.parsing.commands import Command
from nadapi.parsing.replies import Reply
from nadapi.server_app import create_app, ServerSettings
from nadapi.server import ApiServer
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Amplifier",
    "ApiServer",
    "Command",
    "InvalidCommandError",
    "NadError",
    "ProtocolError",
    "Reply",
    "ServerSettings",
    "Source",
    "TransportError",
    "VolumeDisabledError",
    "create_app",
    "create_serial_amplifier",
]

try:
    __version__ = version("nadapi")
except PackageNotFoundError:
    __version__ = "0.0.0"
