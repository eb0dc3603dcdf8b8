"""Tests for the secretenv error hierarchy."""

from __future__ import annotations

import pytest

from secretenv.errors import (
    ConfigError,
    ConfigNotFoundError,
    DecryptionError,
    EncryptionError,
    EnvError,
    ErrorCodes,
    SchemaParseError,
)


class TestEnvError:
    def test_str_includes_code(self) -> None:
        err = EnvError(code="X", message="boom")
        assert str(err) == "[X] boom"
        assert err.details == {}
        assert err.timestamp

    def test_cause_kept(self) -> None:
        cause = ValueError("inner")
        err = ConfigError("bad", cause=cause)
        assert err.cause is cause


class TestSubclasses:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ConfigNotFoundError("/tmp/.env"), ErrorCodes.CONFIG_NOT_FOUND),
            (ConfigError("bad"), ErrorCodes.CONFIG_INVALID),
            (DecryptionError(), ErrorCodes.DECRYPTION_FAILED),
            (EncryptionError(), ErrorCodes.ENCRYPTION_FAILED),
            (SchemaParseError("bad rule"), ErrorCodes.SCHEMA_PARSE_ERROR),
        ],
    )
    def test_codes(self, error: EnvError, code: str) -> None:
        assert isinstance(error, EnvError)
        assert error.code == code

    def test_not_found_details(self) -> None:
        err = ConfigNotFoundError("/tmp/.env")
        assert err.config_path == "/tmp/.env"
        assert "/tmp/.env" in str(err)


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().CONFIG_INVALID = "other"
