"""Tests for configuration loading."""

import pytest

from totp_demo.core.config import Settings, env_int, settings


def test_settings_defaults():
    assert settings.PORT == 8899
    assert settings.TIMEOUT_SECONDS == 15
    assert settings.ISSUER == "totp-issuer@example.com"
    assert settings.ACCOUNT_PREFIX == "account-"
    assert settings.ACCOUNT_NAME_LENGTH == 10
    assert (settings.QR_WIDTH, settings.QR_HEIGHT) == (256, 256)
    assert settings.VALID_WINDOW == 1
    assert isinstance(settings, Settings)


def test_env_int_reads_override(monkeypatch):
    monkeypatch.setenv("ACCOUNT_NAME_LENGTH", "12")
    assert env_int("ACCOUNT_NAME_LENGTH", 10) == 12


def test_env_int_falls_back_to_default(monkeypatch):
    monkeypatch.delenv("ACCOUNT_NAME_LENGTH", raising=False)
    assert env_int("ACCOUNT_NAME_LENGTH", 10) == 10


@pytest.mark.parametrize("value", ["0", "-5"])
def test_env_int_rejects_non_positive_name_length(monkeypatch, value):
    monkeypatch.setenv("ACCOUNT_NAME_LENGTH", value)
    with pytest.raises(ValueError, match="ACCOUNT_NAME_LENGTH must be at least 1"):
        env_int("ACCOUNT_NAME_LENGTH", 10)


def test_env_int_window_may_be_zero(monkeypatch):
    monkeypatch.setenv("TOTP_VALID_WINDOW", "0")
    assert env_int("TOTP_VALID_WINDOW", 1, minimum=0) == 0

    monkeypatch.setenv("TOTP_VALID_WINDOW", "-1")
    with pytest.raises(ValueError):
        env_int("TOTP_VALID_WINDOW", 1, minimum=0)


def test_env_int_rejects_non_numeric(monkeypatch):
    monkeypatch.setenv("QR_WIDTH", "wide")
    with pytest.raises(ValueError):
        env_int("QR_WIDTH", 256)
