from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class ServerSettings(BaseSettings):
    device: Optional[str] = Field(None, validation_alias="NAD_DEVICE")
    enable_volume: bool = Field(False, validation_alias="ENABLE_VOLUME")
    static_dir: Optional[str] = Field(None, validation_alias="STATIC_DIR")

    server_ip: str = Field("127.0.0.1", validation_alias="SERVER_IP")
    server_port: int = Field(8080, validation_alias="SERVER_PORT")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> ServerSettings:
    return ServerSettings()
