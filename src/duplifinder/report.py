"""Duplicate report text and aggregate error state."""

from __future__ import annotations

from dataclasses import dataclass, field

from duplifinder.hasher import DuplicateGroup

HEADER = "The following files are duplicates of eachother:"
NO_DUPLICATES = "No duplicates found!"


@dataclass
class ScanReport:
    """Result of a scan: duplicate groups plus the aggregate error flag."""

    groups: list[DuplicateGroup] = field(default_factory=list)
    errors: bool = False

    @property
    def duplicate_groups(self) -> list[DuplicateGroup]:
        return [g for g in self.groups if len(g.paths) >= 2]

    @property
    def has_duplicates(self) -> bool:
        return bool(self.duplicate_groups)

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 0

    def format(self) -> str:
        lines = [HEADER]
        for group in self.duplicate_groups:
            joined = '", "'.join(str(p) for p in group.paths)
            lines.append(f'  [{len(group.paths)}] "{joined}"')
        if not self.has_duplicates:
            lines.append(NO_DUPLICATES)
        return "\n".join(lines)
