"""Tests for environment-driven server settings."""
from nadapi.server_app.config import ServerSettings


def test_defaults(monkeypatch):
    for name in ("NAD_DEVICE", "ENABLE_VOLUME", "STATIC_DIR", "SERVER_IP", "SERVER_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = ServerSettings(_env_file=None)
    assert settings.device is None
    assert settings.enable_volume is False
    assert settings.server_port == 8080


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("NAD_DEVICE", "/dev/ttyAMA0")
    monkeypatch.setenv("ENABLE_VOLUME", "true")
    monkeypatch.setenv("SERVER_PORT", "9090")
    settings = ServerSettings(_env_file=None)
    assert settings.device == "/dev/ttyAMA0"
    assert settings.enable_volume is True
    assert settings.server_port == 9090


def test_no_serial_line_options():
    assert not any("baud" in name or "parity" in name for name in ServerSettings.model_fields)
