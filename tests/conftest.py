"""Pytest configuration and shared fixtures for torrentctl tests."""

from __future__ import annotations

import logging

import pytest

from tests.utils.fake_client import FakeClient


def pytest_configure(config):
    """Register all project markers to avoid warnings when ini isn't loaded."""
    markers = [
        ("asyncio", "marks tests as async (deselect with '-m \"not asyncio\"')"),
        ("unit", "marks tests as unit tests"),
        ("cli", "marks tests as CLI tests"),
        ("chunking", "marks tests as partial download chunking tests"),
        ("client", "marks tests as client adapter tests"),
        ("config", "marks tests as configuration tests"),
        ("storage", "marks tests as file system reconciliation tests"),
        ("property", "marks tests as property-based tests"),
    ]
    for name, desc in markers:
        config.addinivalue_line("markers", f"{name}: {desc}")


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Keep ConfigManager from picking up the developer's real config files."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for name in ("TORRENTCTL_LOG_LEVEL", "TORRENTCTL_LOG_FILE", "TORRENTCTL_PRIORITY_DELAY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Clean up logging handlers after each test to prevent closed file errors."""
    yield
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        logger = logging.getLogger(logger_name)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    # setup_logging detaches the package logger from root, which hides it from caplog
    package_logger = logging.getLogger("torrentctl")
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_client():
    """A fresh in-memory client."""
    return FakeClient()


@pytest.fixture
def cli_client(monkeypatch, fake_client):
    """Make every CLI command talk to ``fake_client`` without waiting between calls."""
    created: list[str] = []

    def _create_client(name, config_manager, client_registry=None):
        created.append(name)
        fake_client._name = name
        return fake_client

    monkeypatch.setattr("torrentctl.cli.common.create_client", _create_client)
    monkeypatch.setenv("TORRENTCTL_PRIORITY_DELAY", "0")
    fake_client.created = created
    return fake_client
