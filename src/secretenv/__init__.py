"""secretenv - typed, schema-validated env files with optional encryption."""

from __future__ import annotations

# Loading
from secretenv.config import Config
from secretenv.loader import load_env_file
from secretenv.parser import coerce_primitive, is_structured, parse_env

# Schema
from secretenv.schema import (
    ENV_TYPES,
    EnvType,
    SchemaRule,
    create_schema_template,
    dump_schema,
    load_schema,
    validate_all,
    validate_value,
)

# Encryption
from secretenv.crypto import (
    EncryptionProvider,
    FernetProvider,
    decrypt_env_file,
    encrypt_env_file,
)

# Masking
from secretenv.masking import REDACTED_VALUE, mask_keys

# Errors
from secretenv.errors import (
    ConfigError,
    ConfigNotFoundError,
    DecryptionError,
    EncryptionError,
    EnvError,
    ErrorCodes,
    SchemaParseError,
)

__version__ = "0.1.0"

__all__ = [
    # Loading
    "Config",
    "load_env_file",
    "parse_env",
    "is_structured",
    "coerce_primitive",
    # Schema
    "EnvType",
    "ENV_TYPES",
    "SchemaRule",
    "load_schema",
    "validate_value",
    "validate_all",
    "create_schema_template",
    "dump_schema",
    # Encryption
    "EncryptionProvider",
    "FernetProvider",
    "encrypt_env_file",
    "decrypt_env_file",
    # Masking
    "mask_keys",
    "REDACTED_VALUE",
    # Errors
    "EnvError",
    "ConfigNotFoundError",
    "ConfigError",
    "DecryptionError",
    "EncryptionError",
    "SchemaParseError",
    "ErrorCodes",
]
