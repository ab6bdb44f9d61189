"""Shared test fixtures and utilities."""

import pytest
from pathlib import Path

from mcpack.storage import ManifestStorage
from mcpack.utils.manifest import ManifestManager


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty working directory without mcpack overrides."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for key in ("MCPACK_CONFIG_PATH", "MCPACK_MANIFEST_PATH", "MCPACK_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return workdir


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Location of a manifest file that does not exist yet."""
    return tmp_path / "pack" / "manifest.json"


@pytest.fixture
def storage(manifest_path: Path) -> ManifestStorage:
    """Create a ManifestStorage instance for a temporary manifest path."""
    return ManifestStorage(manifest_path)


@pytest.fixture
def manifest_manager(storage: ManifestStorage) -> ManifestManager:
    """Create a ManifestManager instance backed by a temporary manifest path."""
    return ManifestManager(storage=storage)
