"""Symmetric encryption of env files.

The loader only depends on the :class:`EncryptionProvider` protocol.
:class:`FernetProvider` is the default implementation: a random salt and a
PBKDF2-derived key feed a Fernet token, stored as ``salt || token``.
"""

from __future__ import annotations

import base64
import logging
import os
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from secretenv.errors import ConfigError, ConfigNotFoundError, DecryptionError, EncryptionError

__all__ = [
    "EncryptionProvider",
    "FernetProvider",
    "encrypt_env_file",
    "decrypt_env_file",
    "resolve_key",
]

logger = logging.getLogger(__name__)

KeyMaterial = Union[str, bytes]

_SALT_SIZE = 16
_KDF_ITERATIONS = 390_000


@runtime_checkable
class EncryptionProvider(Protocol):
    """Anything that can encrypt and decrypt bytes with a key."""

    def encrypt(self, data: bytes, key: KeyMaterial) -> bytes: ...

    def decrypt(self, data: bytes, key: KeyMaterial) -> bytes: ...


class FernetProvider:
    """Passphrase-based encryption built on ``cryptography.fernet``."""

    def __init__(self, iterations: int = _KDF_ITERATIONS) -> None:
        self._iterations = iterations

    def _fernet(self, key: KeyMaterial, salt: bytes) -> Fernet:
        secret = key.encode("utf-8") if isinstance(key, str) else key
        if not secret:
            raise ConfigError("Encryption key must not be empty")
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt,
            iterations=self._iterations,
        )
        return Fernet(base64.urlsafe_b64encode(kdf.derive(secret)))

    def encrypt(self, data: bytes, key: KeyMaterial) -> bytes:
        salt = os.urandom(_SALT_SIZE)
        try:
            token = self._fernet(key, salt).encrypt(data)
        except (TypeError, ValueError) as e:
            raise EncryptionError(f"Unable to encrypt data: {e}", cause=e) from e
        return salt + token

    def decrypt(self, data: bytes, key: KeyMaterial) -> bytes:
        if len(data) <= _SALT_SIZE:
            raise DecryptionError("Encrypted data is truncated")
        salt, token = data[:_SALT_SIZE], data[_SALT_SIZE:]
        try:
            return self._fernet(key, salt).decrypt(token)
        except InvalidToken as e:
            raise DecryptionError("Invalid key or corrupted data", cause=e) from e


def resolve_key(key: KeyMaterial | None = None, key_file: str | Path | None = None) -> KeyMaterial:
    """Return the key, reading it from key_file when no key is given.

    Raises:
        ConfigError: If neither key nor key_file is provided.
        ConfigNotFoundError: If key_file does not exist.
    """
    if key:
        return key
    if key_file is None:
        raise ConfigError('Either "key" or "key_file" must be provided')
    path = Path(key_file).resolve()
    if not path.is_file():
        raise ConfigNotFoundError(config_path=str(path))
    secret = path.read_text(encoding="utf-8").strip()
    if not secret:
        raise ConfigError(f"Key file is empty: {path}")
    return secret


def _transform_file(
    input_file: str | Path,
    output_file: str | Path,
    key: KeyMaterial | None,
    key_file: str | Path | None,
    provider: EncryptionProvider | None,
    encrypt: bool,
) -> Path:
    secret = resolve_key(key, key_file)
    source = Path(input_file).resolve()
    if not source.is_file():
        raise ConfigNotFoundError(config_path=str(source))

    provider = provider or FernetProvider()
    data = source.read_bytes()
    result = provider.encrypt(data, secret) if encrypt else provider.decrypt(data, secret)

    target = Path(output_file).resolve()
    target.write_bytes(result)
    logger.debug(f"{'Encrypted' if encrypt else 'Decrypted'} {source} -> {target}")
    return target


def encrypt_env_file(
    input_file: str | Path,
    output_file: str | Path,
    *,
    key: KeyMaterial | None = None,
    key_file: str | Path | None = None,
    provider: EncryptionProvider | None = None,
) -> Path:
    """Encrypt a plaintext env file into output_file and return its path."""
    return _transform_file(input_file, output_file, key, key_file, provider, encrypt=True)


def decrypt_env_file(
    input_file: str | Path,
    output_file: str | Path,
    *,
    key: KeyMaterial | None = None,
    key_file: str | Path | None = None,
    provider: EncryptionProvider | None = None,
) -> Path:
    """Decrypt an encrypted env file into output_file and return its path."""
    return _transform_file(input_file, output_file, key, key_file, provider, encrypt=False)
