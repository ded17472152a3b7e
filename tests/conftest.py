"""Shared test fixtures."""

from pathlib import Path

import pytest

from increment_cargo_version.config import Config


class RecordingSink:
    """Collects diagnostic messages for assertions."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def sink() -> RecordingSink:
    """Create a sink that records messages."""
    return RecordingSink()


@pytest.fixture
def cargo_project(tmp_path: Path) -> Config:
    """Create a manifest and lock file declaring version 0.1.4."""
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text('[package]\nname = "demo"\nversion = "0.1.4"\n')

    lock = tmp_path / "Cargo.lock"
    lock.write_text(
        "version = 3\n"
        "\n"
        "[[package]]\n"
        'name = "demo"\n'
        'version = "0.1.4"\n'
        "\n"
        "[[package]]\n"
        'name = "demo-macros"\n'
        'version = "0.1.4"\n'
    )

    return Config(manifest_path=manifest, lock_path=lock)
