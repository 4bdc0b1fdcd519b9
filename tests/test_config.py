# tests/test_config.py
import pytest
from pydantic import ValidationError

from feedback_api.config import DEFAULT_MOUNT_PATH, DEFAULT_PORT, Settings, normalize_mount_path

ENV_VARS = ["HOST", "PORT", "DATABASE_URL", "FEEDBACK_MOUNT_PATH", "CORS_ORIGINS", "DB_FAIL_FAST", "DB_ECHO", "LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()

    assert settings.port == DEFAULT_PORT == 5001
    assert settings.mount_path == DEFAULT_MOUNT_PATH
    assert settings.cors_origins == ["*"]
    assert settings.db_fail_fast is False


def test_values_from_environment(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("DATABASE_URL", "postgresql://user:pw@db/feedback")
    clean_env.setenv("FEEDBACK_MOUNT_PATH", "palaute/")
    clean_env.setenv("CORS_ORIGINS", "http://localhost:3000, https://example.com")
    clean_env.setenv("DB_FAIL_FAST", "true")
    clean_env.setenv("DB_ECHO", "1")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.port == 8080
    assert settings.database_url == "postgresql://user:pw@db/feedback"
    assert settings.mount_path == "/palaute"
    assert settings.cors_origins == ["http://localhost:3000", "https://example.com"]
    assert settings.db_fail_fast is True
    assert settings.db_echo is True
    assert settings.log_level == "DEBUG"


def test_keyword_arguments_are_validated(clean_env):
    settings = Settings(mount_path="v2/palaute/", cors_origins="http://a.fi,http://b.fi")

    assert settings.mount_path == "/v2/palaute"
    assert settings.cors_origins == ["http://a.fi", "http://b.fi"]


def test_invalid_port_is_rejected(clean_env):
    clean_env.setenv("PORT", "not-a-port")
    with pytest.raises(ValidationError):
        Settings()


def test_root_mount_path_from_environment_is_rejected(clean_env):
    clean_env.setenv("FEEDBACK_MOUNT_PATH", "/")
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize("raw, expected", [
    ("/api/feedback", "/api/feedback"),
    ("api/feedback/", "/api/feedback"),
    ("  /v2/palaute//  ", "/v2/palaute"),
])
def test_normalize_mount_path(raw, expected):
    assert normalize_mount_path(raw) == expected


@pytest.mark.parametrize("raw", ["/", "", "  "])
def test_root_mount_path_is_rejected(raw):
    with pytest.raises(ValueError):
        normalize_mount_path(raw)
