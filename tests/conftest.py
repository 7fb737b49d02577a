"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from txt2link.api.convert.ConvertConfig import ConvertConfig
from txt2link.display.CLIDisplay import CLIDisplay


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single function or class")
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
# Fixtures
# =============================================================================


@pytest.fixture
def display() -> CLIDisplay:
    """CLIDisplay writing to the (captured) stdout."""
    return CLIDisplay()


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., ConvertConfig]:
    """Factory for ConvertConfig rooted at tmp_path unless a path is given."""

    def _make(**overrides) -> ConvertConfig:
        overrides.setdefault("path", tmp_path)
        return ConvertConfig(**overrides)

    return _make


@pytest.fixture
def link_dir(tmp_path: Path) -> Path:
    """A directory holding target.txt and link.txt -> 'target.txt'."""
    (tmp_path / "target.txt").write_text("real content\n")
    (tmp_path / "link.txt").write_text("target.txt")
    return tmp_path
