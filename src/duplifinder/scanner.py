"""Root validation, recursive file discovery and size bucketing."""

from __future__ import annotations

import logging
import os
import pathlib
from collections import defaultdict
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class InvalidRootError(Exception):
    """A root directory does not exist, cannot be opened or is no directory."""

    def __init__(self, root: str, message: str) -> None:
        super().__init__(message)
        self.root = root


class SizeBuckets:
    """Multi-map of file size in bytes to the paths observed with that size."""

    def __init__(self) -> None:
        self._buckets: dict[int, list[pathlib.Path]] = defaultdict(list)

    def add(self, size: int, path: pathlib.Path) -> None:
        self._buckets[size].append(path)

    def items(self) -> Iterator[tuple[int, list[pathlib.Path]]]:
        """Yield ``(size, paths)`` in the order sizes were first seen."""
        yield from self._buckets.items()

    def candidates(self) -> Iterator[tuple[int, list[pathlib.Path]]]:
        """Yield ``(size, paths)`` for every size shared by at least two files."""
        for size, paths in self.items():
            if len(paths) >= 2:
                yield size, paths

    @property
    def total(self) -> int:
        return sum(len(paths) for _, paths in self.items())

    def __len__(self) -> int:
        return len(self._buckets)


def check_root(root: str) -> pathlib.Path:
    """Validate a user supplied root directory.

    Raises InvalidRootError if it is missing, not a directory or not listable.
    """
    path = pathlib.Path(root)
    try:
        is_dir = path.is_dir()
        exists = is_dir or path.exists()
    except OSError as exc:
        raise InvalidRootError(root, f'Unable to stat file "{root}", skipping...') from exc
    if not exists:
        raise InvalidRootError(root, f'unable to open directory "{root}", skipping...')
    if not is_dir:
        raise InvalidRootError(root, f'Dirname "{root}" is not a directory, skipping...')
    try:
        with os.scandir(path):
            pass
    except OSError as exc:
        raise InvalidRootError(root, f'unable to open directory "{root}", skipping...') from exc
    return path


def collect(directory: pathlib.Path, buckets: SizeBuckets) -> None:
    """Add every regular file below *directory* to *buckets*, depth first.

    Symlinks are never followed. Directories that cannot be listed and
    entries that cannot be stat'ed are skipped without raising.
    """
    stack = [directory]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as exc:
            logger.debug(f"skipping unreadable directory {current}: {exc}")
            continue

        subdirs: list[pathlib.Path] = []
        for entry in entries:
            path = pathlib.Path(entry.path)
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(path)
                    continue
                if not entry.is_file(follow_symlinks=False):
                    continue
                size = entry.stat(follow_symlinks=False).st_size
            except OSError as exc:
                logger.debug(f"skipping {path}: {exc}")
                continue
            buckets.add(size, path)

        # first listed subdirectory is walked next
        stack.extend(reversed(subdirs))
