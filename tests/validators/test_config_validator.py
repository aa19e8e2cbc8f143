"""Tests for startup configuration validation"""
import pytest

from src.validators.config_validator import collect_config_errors, validate_config

VALID_ENV = {
    "ENVIRONMENT": "test",
    "PORT": "8000",
    "SERVICE_NAME": "storefront-service",
    "MONGO_INITDB_DATABASE": "storefront_test_db",
}


class TestCollectConfigErrors:
    def test_valid_environment(self):
        environ = dict(VALID_ENV)

        errors, warnings = collect_config_errors(environ)

        assert errors == []
        assert warnings

    def test_defaults_are_filled_in(self):
        environ = dict(VALID_ENV)

        collect_config_errors(environ)

        assert environ["MONGODB_HOST"] == "localhost"
        assert environ["MONGODB_PORT"] == "27017"
        assert environ["LOG_LEVEL"] == "INFO"

    def test_missing_required_variable(self):
        environ = dict(VALID_ENV)
        del environ["MONGO_INITDB_DATABASE"]

        errors, _ = collect_config_errors(environ)

        assert errors == ["MONGO_INITDB_DATABASE is required but not set"]

    @pytest.mark.parametrize("key,value", [
        ("PORT", "99999"),
        ("ENVIRONMENT", "qa"),
        ("LOG_LEVEL", "LOUD"),
        ("CORS_ORIGINS", "not a url"),
    ])
    def test_invalid_values(self, key, value):
        environ = dict(VALID_ENV, **{key: value})

        errors, _ = collect_config_errors(environ)

        assert len(errors) == 1
        assert errors[0].startswith(key)


def test_validate_config_exits_on_error(monkeypatch):
    monkeypatch.delenv("SERVICE_NAME", raising=False)

    with pytest.raises(SystemExit):
        validate_config()
