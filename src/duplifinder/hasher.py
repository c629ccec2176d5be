"""2-phase duplicate detection: size buckets, then SHA256 over a bounded prefix."""

from __future__ import annotations

import hashlib
import logging
import pathlib
from collections import defaultdict
from dataclasses import dataclass

from tqdm import tqdm

from duplifinder.scanner import SizeBuckets

logger = logging.getLogger(__name__)

# Number of leading bytes of a file that take part in the digest.
HASH_MAX = 1024 * 1024


class HashError(Exception):
    """A file selected for hashing could not be hashed."""

    reason = "unable to hash"

    def __init__(self, path: pathlib.Path) -> None:
        super().__init__(f'Skipping: "{path}", {self.reason}.')
        self.path = path


class OpenError(HashError):
    reason = "unable to open"


class ReadError(HashError):
    reason = "unable to read"


@dataclass
class DuplicateGroup:
    """A group of files with identical size and prefix digest."""

    hash: str
    file_size: int
    paths: list[pathlib.Path]


class HashBuckets:
    """Multi-map of ``(size, digest)`` to the paths sharing them."""

    def __init__(self) -> None:
        self._buckets: dict[tuple[int, str], list[pathlib.Path]] = defaultdict(list)

    def add(self, size: int, digest: str, path: pathlib.Path) -> None:
        self._buckets[(size, digest)].append(path)

    def groups(self) -> list[DuplicateGroup]:
        """Return a DuplicateGroup for every bucket with at least two paths."""
        return [
            DuplicateGroup(hash=digest, file_size=size, paths=list(paths))
            for (size, digest), paths in self._buckets.items()
            if len(paths) >= 2
        ]

    def __len__(self) -> int:
        return len(self._buckets)


def hash_prefix(path: pathlib.Path) -> str:
    """Compute the SHA256 hex digest of the first HASH_MAX bytes of a file.

    Files shorter than HASH_MAX are hashed over the bytes they have.
    Raises OpenError or ReadError; the file is closed on every path.
    """
    try:
        f = path.open("rb")
    except OSError as exc:
        raise OpenError(path) from exc
    with f:
        try:
            data = f.read(HASH_MAX)
        except OSError as exc:
            raise ReadError(path) from exc
    return hashlib.sha256(data).hexdigest()


def find_duplicates(
    size_buckets: SizeBuckets, progress: bool = False
) -> tuple[list[DuplicateGroup], bool]:
    """Hash every file sharing its size with another and group by digest.

    Returns the duplicate groups and whether any file failed to hash.
    """
    candidates = list(size_buckets.candidates())
    files_to_hash = sum(len(paths) for _, paths in candidates)
    logger.debug(
        f"phase 1 (size grouping): {size_buckets.total} files -> "
        f"{len(size_buckets) - len(candidates)} unique by size, "
        f"{len(candidates)} size group(s) with {files_to_hash} files to hash"
    )

    hash_buckets = HashBuckets()
    errors = False
    hashed = 0
    with tqdm(total=files_to_hash, desc="Hashing", unit="file", disable=not progress) as bar:
        for size, paths in candidates:
            for p in paths:
                try:
                    digest = hash_prefix(p)
                except HashError as exc:
                    logger.error(str(exc))
                    errors = True
                    continue
                finally:
                    bar.update(1)
                hashed += 1
                logger.debug(f"  {digest[:12]}.. {p}")
                hash_buckets.add(size, digest, p)

    groups = hash_buckets.groups()
    logger.debug(f"phase 2 (hashing): {hashed} files hashed, {len(groups)} duplicate group(s)")
    return groups, errors
