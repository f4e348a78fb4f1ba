"""
Tests for environment-driven settings.
"""

from adventure_board.config import Settings


def test_defaults():
    settings = Settings.load({})

    assert settings.PORT_API == 3000
    assert settings.DB_PORT == 3306
    assert settings.DB_MAX == 10
    assert settings.RATE_LIMIT_ENABLED is False
    assert settings.RATE_LIMIT_WINDOW_MS == 15 * 60 * 1000
    assert settings.allowed_origins == ["http://localhost:3000"]


def test_coerces_by_annotation():
    settings = Settings.load(
        {
            "PORT_API": "8080",
            "DEBUG_MODE": "yes",
            "RATE_LIMIT_ENABLED": "0",
            "REFRESH_INTERVAL_SECONDS": "1.5",
            "DB_USER": "bot",
        }
    )

    assert settings.PORT_API == 8080
    assert settings.DEBUG_MODE is True
    assert settings.RATE_LIMIT_ENABLED is False
    assert settings.REFRESH_INTERVAL_SECONDS == 1.5
    assert settings.DB_USER == "bot"


def test_empty_values_keep_defaults():
    settings = Settings.load({"DB_PORT": "", "SENTRY_DSN": ""})

    assert settings.DB_PORT == 3306
    assert settings.SENTRY_DSN is None


def test_allowed_origins_split():
    settings = Settings.load({"ALLOWED_ORIGINS": "https://a.example, https://b.example,,"})

    assert settings.allowed_origins == ["https://a.example", "https://b.example"]


def test_legacy_names_are_fallbacks():
    settings = Settings.load({"PORT": "4000", "DB_PASSWORD": "s3cret", "NODE_ENV": "production"})

    assert settings.PORT_API == 4000
    assert settings.DB_PASS == "s3cret"
    assert settings.ENVIRONMENT == "production"


def test_primary_names_win_over_legacy():
    settings = Settings.load({"PORT_API": "8080", "PORT": "4000", "DB_PASS": "a", "DB_PASSWORD": "b"})

    assert settings.PORT_API == 8080
    assert settings.DB_PASS == "a"
