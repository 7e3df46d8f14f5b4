from nadapi.server_app.api import create_app
from nadapi.server_app.config import ServerSettings, get_settings

__all__ = ["create_app", "ServerSettings", "get_settings"]
