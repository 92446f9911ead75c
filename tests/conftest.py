"""Shared test fixtures for depscope tests."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


class RepoBuilder:
    """Writes files under a temporary repository root."""

    def __init__(self, root: Path):
        self.root = root

    def write(self, rel_path: str, content: str = "") -> Path:
        path = self.root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def mkdir(self, rel_path: str) -> Path:
        path = self.root / rel_path
        path.mkdir(parents=True, exist_ok=True)
        return path

    def path(self, rel_path: str) -> Path:
        return self.root / rel_path


@pytest.fixture
def repo(tmp_path):
    """Empty repository root with a file-writing helper."""
    root = tmp_path / "repo"
    root.mkdir()
    return RepoBuilder(root)


@pytest.fixture
def chain_graph():
    """Chain graph: a -> b -> c -> d."""
    return {
        "a": frozenset({"b"}),
        "b": frozenset({"c"}),
        "c": frozenset({"d"}),
        "d": frozenset(),
    }


@pytest.fixture
def star_graph():
    """Star graph: 3 leaves depend on the hub, the hub depends on one file."""
    return {
        "hub": frozenset({"base"}),
        "x": frozenset({"hub"}),
        "y": frozenset({"hub"}),
        "z": frozenset({"hub"}),
        "base": frozenset(),
    }
