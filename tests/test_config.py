from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.network import NetworkType


def test_defaults():
    settings = AppSettings(_env_file=None)
    assert settings.network is NetworkType.TESTNET
    assert settings.http_timeout_seconds == 10.0
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ACME_WALLET_NETWORK", "MAINNET")
    monkeypatch.setenv("ACME_WALLET_LOG_LEVEL", "debug")
    settings = AppSettings(_env_file=None)
    assert settings.network is NetworkType.MAINNET
    assert settings.log_level == "DEBUG"


def test_invalid_network(monkeypatch):
    monkeypatch.setenv("ACME_WALLET_NETWORK", "devnet")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("ACME_WALLET_HTTP_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_env_file_is_read(tmp_path):
    env = tmp_path / "custom.env"
    env.write_text("ACME_WALLET_NETWORK=mainnet\n", encoding="utf-8")
    assert AppSettings(_env_file=env).network is NetworkType.MAINNET


def test_write_user_env_vars_merges(tmp_path):
    path = write_user_env_vars({"ACME_WALLET_NETWORK": "mainnet"})
    assert path == get_user_env_file()
    assert str(path).startswith(str(tmp_path))

    write_user_env_vars({"ACME_WALLET_LOG_LEVEL": "INFO"})
    text = path.read_text(encoding="utf-8")
    assert "ACME_WALLET_NETWORK=mainnet" in text
    assert "ACME_WALLET_LOG_LEVEL=INFO" in text
