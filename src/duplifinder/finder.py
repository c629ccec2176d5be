"""Scan pipeline: validate roots, walk, hash, build the report."""

from __future__ import annotations

import logging

from duplifinder.hasher import find_duplicates
from duplifinder.report import ScanReport
from duplifinder.scanner import InvalidRootError, SizeBuckets, check_root, collect

logger = logging.getLogger(__name__)


def run_scan(roots: list[str], progress: bool = False) -> ScanReport:
    """Scan every root directory and return the duplicate report.

    Roots are de-duplicated by exact string, without resolving them.
    Invalid roots are logged and skipped; the scan always completes.
    """
    report = ScanReport()
    buckets = SizeBuckets()
    seen: set[str] = set()
    walked = 0

    for root in roots:
        if root in seen:
            logger.debug(f"ignoring repeated root {root}")
            continue
        seen.add(root)

        try:
            directory = check_root(root)
        except InvalidRootError as exc:
            logger.error(str(exc))
            report.errors = True
            continue

        logger.info(f"Scanning {root} ...")
        collect(directory, buckets)
        walked += 1

    logger.info(f"Found {buckets.total} file(s) in {walked} root(s)")

    groups, hash_errors = find_duplicates(buckets, progress=progress)
    report.groups = groups
    report.errors = report.errors or hash_errors
    return report
