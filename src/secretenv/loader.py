"""Load env files into validated, read-only Config objects."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from secretenv.config import Config
from secretenv.crypto import EncryptionProvider, FernetProvider, KeyMaterial, resolve_key
from secretenv.errors import ConfigNotFoundError, DecryptionError
from secretenv.parser import parse_env
from secretenv.schema.types import RuleLike, to_rules
from secretenv.schema.validator import validate_all

__all__ = ["load_env_file"]

logger = logging.getLogger(__name__)


def load_env_file(
    filename: str | Path,
    encrypt_key: KeyMaterial | None = None,
    schema: Iterable[RuleLike] | None = None,
    *,
    key_file: str | Path | None = None,
    provider: EncryptionProvider | None = None,
) -> Config:
    """Load a plaintext or encrypted env file.

    Args:
        filename: Path to the env file, relative to the working directory.
        encrypt_key: Key for an encrypted file. Plaintext is assumed when
            neither this nor key_file is given.
        schema: Rules (SchemaRule objects or mappings) to validate against.
        key_file: File holding the key, used when encrypt_key is not given.
        provider: Encryption provider; defaults to FernetProvider.

    Returns:
        A Config holding the typed values and any validation errors.

    Raises:
        ConfigNotFoundError: If the env file or key file does not exist.
        DecryptionError: If the file cannot be decrypted with the key.
        SchemaParseError: If a schema rule is malformed.
    """
    resolved_path = Path(filename).resolve()
    if not resolved_path.is_file():
        raise ConfigNotFoundError(config_path=str(resolved_path))

    rules = to_rules(schema)

    if encrypt_key or key_file is not None:
        secret = resolve_key(encrypt_key, key_file)
        provider = provider or FernetProvider()
        plain = provider.decrypt(resolved_path.read_bytes(), secret)
        try:
            raw = plain.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionError(
                f"Decrypted content of {resolved_path} is not UTF-8 text", cause=e
            ) from e
    else:
        raw = resolved_path.read_text(encoding="utf-8")

    values = parse_env(raw)
    logger.debug(f"Parsed {len(values)} keys from {resolved_path}")

    errors = validate_all(values, rules)
    if errors:
        logger.warning(f"{resolved_path} has {len(errors)} validation error(s)")

    return Config(values, errors)
