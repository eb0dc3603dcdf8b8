"""Shared fixtures for the secretenv test suite."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from secretenv.crypto import FernetProvider


class ReversingProvider:
    """Toy provider that reverses bytes and checks the key."""

    def __init__(self, expected_key: str = "k") -> None:
        self.expected_key = expected_key
        self.calls: list[str] = []

    def encrypt(self, data: bytes, key: str | bytes) -> bytes:
        self.calls.append("encrypt")
        return data[::-1]

    def decrypt(self, data: bytes, key: str | bytes) -> bytes:
        self.calls.append("decrypt")
        if key != self.expected_key:
            raise ValueError("wrong key")
        return data[::-1]


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[..., Path]:
    """Returns a helper that writes dedented content to a file under tmp_path."""

    def _write(content: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fast_provider() -> FernetProvider:
    """FernetProvider with a low KDF iteration count to keep tests quick."""
    return FernetProvider(iterations=1_000)


@pytest.fixture
def reversing_provider() -> ReversingProvider:
    return ReversingProvider()
