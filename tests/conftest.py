"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from wikiverify.utils.logger import reset_logging


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of single modules")
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def write_workspace(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def wikiverify_home(tmp_path: Path, monkeypatch) -> Path:
    """Point WIKIVERIFY_HOME at a temporary directory for every test."""
    home = tmp_path / ".wikiverify"
    monkeypatch.setenv("WIKIVERIFY_HOME", str(home))
    yield home
    reset_logging()


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd


@pytest.fixture
def make_workspace(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Factory building a workspace directory from a {path: content} dict."""

    def _make(files: dict[str, str | bytes]) -> Path:
        return write_workspace(tmp_path / "workspace", files)

    return _make


@pytest.fixture
def write_config(wikiverify_home: Path) -> Callable[[dict], Path]:
    """Write a config.json into WIKIVERIFY_HOME."""

    def _write(config: dict) -> Path:
        wikiverify_home.mkdir(parents=True, exist_ok=True)
        path = wikiverify_home / "config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return path

    return _write
