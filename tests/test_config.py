"""Tests for Settings loading."""

from __future__ import annotations

from aptos_helper.config import Settings, get_settings


def _fresh(monkeypatch, **env) -> Settings:
    for key in ("TELEGRAM_BOT_TOKEN", "RATE_LIMIT_WINDOW_MS", "PORT", "HEALTH_ENABLED"):
        monkeypatch.delenv(key, raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return Settings(_env_file=None)


def test_defaults(monkeypatch):
    s = _fresh(monkeypatch)
    assert s.TELEGRAM_BOT_TOKEN == ""
    assert s.RATE_LIMIT_WINDOW_MS == 2000
    assert s.PORT == 3000
    assert s.HEALTH_ENABLED is True
    assert s.APTOS_TESTNET_URL == "https://api.testnet.aptoslabs.com/v1"
    assert s.APTOS_MAINNET_URL == "https://api.mainnet.aptoslabs.com/v1"
    assert s.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    s = _fresh(
        monkeypatch,
        TELEGRAM_BOT_TOKEN="123456:ABC-DEF",
        RATE_LIMIT_WINDOW_MS="500",
        PORT="8080",
        HEALTH_ENABLED="false",
    )
    assert s.TELEGRAM_BOT_TOKEN == "123456:ABC-DEF"
    assert s.RATE_LIMIT_WINDOW_MS == 500
    assert s.PORT == 8080
    assert s.HEALTH_ENABLED is False


def test_env_file(monkeypatch, tmp_path):
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("TELEGRAM_BOT_TOKEN=from-file\nUNKNOWN_KEY=ignored\n")

    s = Settings(_env_file=str(env_file))

    assert s.TELEGRAM_BOT_TOKEN == "from-file"


def test_explorer_account_url(monkeypatch):
    s = _fresh(monkeypatch)
    assert (
        s.explorer_account_url("0xabc")
        == "https://explorer.aptoslabs.com/account/0xabc?network=testnet"
    )
    assert s.explorer_account_url("0xabc", "mainnet").endswith("?network=mainnet")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
