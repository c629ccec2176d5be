"""Shared fixtures for duplifinder tests."""

import logging
import pathlib
import sys

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("duplifinder")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def dir_a(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty directory A."""
    d = tmp_path / "A"
    d.mkdir()
    return d


@pytest.fixture
def dir_b(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty directory B."""
    d = tmp_path / "B"
    d.mkdir()
    return d


@pytest.fixture
def hello_pair(dir_a: pathlib.Path) -> tuple[pathlib.Path, pathlib.Path]:
    """Two 5-byte files with identical content in A."""
    x = dir_a / "x"
    y = dir_a / "y"
    x.write_bytes(b"hello")
    y.write_bytes(b"hello")
    return x, y


@pytest.fixture
def deep_tree(tmp_path: pathlib.Path):
    """A chain of nested directories deeper than the recursion limit.

    Yields ``(root, bottom)``; two identical files live in ``bottom``.
    Built and removed iteratively.
    """
    root = tmp_path / "r"
    root.mkdir()
    dirs = [root]
    for _ in range(sys.getrecursionlimit() + 100):
        d = dirs[-1] / "a"
        d.mkdir()
        dirs.append(d)
    bottom = dirs[-1]
    files = [bottom / "one", bottom / "two"]
    for f in files:
        f.write_bytes(b"deep down")
    yield root, bottom
    for f in files:
        f.unlink(missing_ok=True)
    for d in reversed(dirs):
        d.rmdir()
