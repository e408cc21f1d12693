"""Shared pytest configuration and fixtures for all tests."""

import hashlib
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register the markers used across the suite."""
    for marker, description in (
        ("unit", "fast tests without external processes"),
        ("scan", "scan engine, remediation and scan commands"),
        ("config", "configuration loading and validation"),
        ("cli", "Typer command line"),
    ):
        config.addinivalue_line("markers", f"{marker}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Helpers
# =============================================================================


def sha1_hex(data: bytes) -> str:
    """SHA-1 of ``data`` as lowercase hex."""
    return hashlib.sha1(data).hexdigest()


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def sigscan_home(tmp_path: Path, monkeypatch) -> Path:
    """Point SIGSCAN_HOME at a per-test directory.

    Returns:
        Path to the sigscan home directory
    """
    home = tmp_path / ".sigscan"
    monkeypatch.setenv("SIGSCAN_HOME", str(home))
    return home


@pytest.fixture
def scan_root(tmp_path: Path) -> Path:
    """Empty directory to scan."""
    root = tmp_path / "scan_root"
    root.mkdir()
    return root


@pytest.fixture
def use_signatures(monkeypatch):
    """Replace the signature set with digests of the given contents.

    Returns a function taking byte strings and returning their digests.
    """
    from sigscan.api.scan import signatures

    def _use(*contents: bytes) -> list[str]:
        digests = [sha1_hex(content) for content in contents]
        monkeypatch.setattr(signatures, "INFECTED_HASHES", frozenset(digests))
        return digests

    return _use
