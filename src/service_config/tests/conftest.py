# ABOUTME: pytest configuration for service_config tests
# ABOUTME: Configures timeouts, isolates the process environment and builds resolver fixtures

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest
from loguru import logger

from service_config.config import ServiceConfig, ServiceSettings, get_service_config, get_settings
from service_config.implementations.memory import InMemoryConfigSource

PUBLIC_KEY = b"this is public key"
PRIVATE_KEY = b"this is private key"


def pytest_configure(config):
    """Configure pytest for service_config tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test in an empty working directory without SERVICE_* variables."""
    for name in list(os.environ):
        if name.upper().startswith("SERVICE_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    get_service_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_service_config.cache_clear()


@pytest.fixture(autouse=True)
def restore_loguru():
    """Put loguru back to its default stderr handler after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def write_manifest(tmp_path) -> Callable[..., Path]:
    """Factory fixture writing a pyproject.toml manifest.

    Usage:
        def test_something(write_manifest):
            path = write_manifest(name="orders-api", version="2.3.0")
    """

    def _write(name: Optional[str] = "orders-api", version: Optional[str] = "2.3.0",
               description: Optional[str] = "Orders API", file_name: str = "pyproject.toml") -> Path:
        lines = ["[project]"]
        if name is not None:
            lines.append(f'name = "{name}"')
        if version is not None:
            lines.append(f'version = "{version}"')
        if description is not None:
            lines.append(f'description = "{description}"')
        path = tmp_path / file_name
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture
def keys_dir(tmp_path) -> Path:
    """Directory holding both keys of the service."""
    directory = tmp_path / "keys"
    directory.mkdir()
    (directory / "public_key.pem").write_bytes(PUBLIC_KEY)
    (directory / "private_key.pem").write_bytes(PRIVATE_KEY)
    return directory


@pytest.fixture
def make_config(tmp_path, write_manifest) -> Callable[..., ServiceConfig]:
    """Factory fixture building a ServiceConfig over an in-memory source.

    Usage:
        def test_something(make_config):
            config = make_config("production", {"database.host": "db"})
    """

    def _make(env: Optional[str] = "test", data: Optional[Dict[str, Any]] = None,
              manifest: Optional[Path] = None, keys: Optional[Path] = None) -> ServiceConfig:
        if manifest is None:
            manifest = write_manifest()
        settings = ServiceSettings(
            ENV=env,
            MANIFEST_PATH=str(manifest),
            KEYS_DIR=str(keys if keys is not None else tmp_path / "keys"),
            CONFIG_DIR=str(tmp_path / "config"),
        )
        return ServiceConfig(source=InMemoryConfigSource(data), settings=settings)

    return _make
