"""Tests for the anonqa-server CLI."""

from unittest.mock import patch

from anonqa.config import settings
from anonqa.server_cli import main


def test_defaults_come_from_settings():
    with patch("uvicorn.run") as run:
        main([])
    run.assert_called_once_with("anonqa.main:app", host=settings.host, port=settings.port)


def test_host_port_and_dev_flags(monkeypatch):
    monkeypatch.setattr(settings, "dev_mode", False)
    with patch("uvicorn.run") as run:
        main(["--host", "127.0.0.1", "--port", "9000", "--dev"])
    run.assert_called_once_with("anonqa.main:app", host="127.0.0.1", port=9000)
    assert settings.dev_mode is True
