"""Error hierarchy for secretenv.

Only structural failures are raised. Schema violations are collected as
plain messages on the loaded :class:`~secretenv.config.Config`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "EnvError",
    "ConfigNotFoundError",
    "ConfigError",
    "DecryptionError",
    "EncryptionError",
    "SchemaParseError",
    "ErrorCodes",
]


class EnvError(Exception):
    """Base error for all secretenv errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(EnvError):
    """Raised when an env, key or schema file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found at: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The resolved path that does not exist."""
        return self.details["config_path"]


class ConfigError(EnvError):
    """Raised when loader or helper arguments are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class DecryptionError(EnvError):
    """Raised when an encrypted env file cannot be decrypted."""

    def __init__(self, message: str = "Unable to decrypt data", **kwargs: Any) -> None:
        super().__init__(code="DECRYPTION_FAILED", message=message, **kwargs)


class EncryptionError(EnvError):
    """Raised when plaintext cannot be encrypted."""

    def __init__(self, message: str = "Unable to encrypt data", **kwargs: Any) -> None:
        super().__init__(code="ENCRYPTION_FAILED", message=message, **kwargs)


class SchemaParseError(EnvError):
    """Raised when a schema file or rule definition is malformed."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="SCHEMA_PARSE_ERROR", message=message, **kwargs)


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.DECRYPTION_FAILED:
            ask_for_another_key()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    DECRYPTION_FAILED = "DECRYPTION_FAILED"
    ENCRYPTION_FAILED = "ENCRYPTION_FAILED"
    SCHEMA_PARSE_ERROR = "SCHEMA_PARSE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
