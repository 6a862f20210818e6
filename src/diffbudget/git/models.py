"""Data models for git status entries and change categories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """One ``git status`` line: path plus index / working-tree status codes."""

    path: str  # renames arrive as 'old -> new'
    index_status: str = " "
    working_tree_status: str = " "


@dataclass(frozen=True, slots=True)
class RenamedFile:
    from_path: str
    to_path: str


@dataclass(frozen=True)
class FileCategories:
    """Partition of a changeset's paths by operation.

    Every changed path lands in exactly one bucket; renames are recorded as
    a from/to pair rather than as two paths.
    """

    added: Tuple[str, ...] = ()
    modified: Tuple[str, ...] = ()
    deleted: Tuple[str, ...] = ()
    renamed: Tuple[RenamedFile, ...] = ()
    binary: Tuple[str, ...] = ()

    @property
    def non_empty_count(self) -> int:
        return sum(
            1
            for bucket in (self.added, self.modified, self.deleted, self.renamed, self.binary)
            if bucket
        )

    @property
    def is_empty(self) -> bool:
        return self.non_empty_count == 0

    def all_paths(self) -> list[str]:
        """Every path, renames contributing their source path."""
        return [
            *self.added,
            *self.modified,
            *self.deleted,
            *(r.from_path for r in self.renamed),
            *self.binary,
        ]


@dataclass(frozen=True)
class DiffMetadata:
    """What the caller needs to know about a diff before prompting."""

    file_count: int
    is_truncated: bool
    has_reserved_names: bool
    original_tokens: Optional[int] = None
    truncated_tokens: Optional[int] = None
    reserved_files: Tuple[str, ...] = ()
    categories: Optional[FileCategories] = None


@dataclass(frozen=True)
class DiffResult:
    content: str
    metadata: DiffMetadata
