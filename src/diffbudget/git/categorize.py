"""Group git status entries by operation and build diff metadata."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from diffbudget.diff.tokens import MAX_INPUT_TOKENS
from diffbudget.diff.truncator import truncate_diff
from diffbudget.git.models import (
    DiffMetadata,
    DiffResult,
    FileCategories,
    RenamedFile,
    StatusEntry,
)

_RENAME_SEPARATOR = " -> "

RESERVED_NAMES: frozenset[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)


def categorize_files(
    entries: Iterable[StatusEntry],
    binary_paths: Optional[Iterable[str]] = None,
) -> FileCategories:
    """Partition *entries* into added / modified / deleted / renamed / binary.

    The index status wins over the working-tree status. Paths listed in
    *binary_paths* go to ``binary`` instead of their operation bucket.
    Rename entries without exactly one ``' -> '`` separator are dropped.
    """
    binaries = set(binary_paths or ())
    added: List[str] = []
    modified: List[str] = []
    deleted: List[str] = []
    renamed: List[RenamedFile] = []
    binary: List[str] = []

    for entry in entries:
        index = entry.index_status
        path = entry.path

        if index == "R" or _RENAME_SEPARATOR in path:
            parts = path.split(_RENAME_SEPARATOR)
            if len(parts) == 2:
                renamed.append(RenamedFile(parts[0].strip(), parts[1].strip()))
            continue

        if path in binaries:
            binary.append(path)
            continue

        if index in ("A", "?"):
            added.append(path)
        elif index == "D":
            deleted.append(path)
        elif index == "M":
            modified.append(path)
        elif entry.working_tree_status in ("?", "A"):
            added.append(path)
        elif entry.working_tree_status == "M":
            modified.append(path)
        elif entry.working_tree_status == "D":
            deleted.append(path)

    return FileCategories(
        added=tuple(added),
        modified=tuple(modified),
        deleted=tuple(deleted),
        renamed=tuple(renamed),
        binary=tuple(binary),
    )


def _section(title: str, items: Sequence[str]) -> str:
    listing = "\n".join(f"  - {item}" for item in items)
    return f"{title} ({len(items)} files):\n{listing}"


def generate_file_summary(categories: FileCategories) -> str:
    """Human-readable listing of each non-empty category."""
    sections: List[str] = []
    if categories.added:
        sections.append(_section("Added", categories.added))
    if categories.modified:
        sections.append(_section("Modified", categories.modified))
    if categories.deleted:
        sections.append(_section("Deleted", categories.deleted))
    if categories.renamed:
        sections.append(
            _section("Renamed", [f"{r.from_path} -> {r.to_path}" for r in categories.renamed])
        )
    if categories.binary:
        sections.append(_section("Binary", categories.binary))
    return "\n\n".join(sections)


def is_windows_reserved_name(path: str) -> bool:
    """True for CON, NUL, COM1 ... regardless of extension or case."""
    basename = path.replace("\\", "/").rsplit("/", 1)[-1]
    stem = basename.split(".")[0]
    return stem.upper() in RESERVED_NAMES


def detect_reserved_files(paths: Iterable[str]) -> List[str]:
    return [p for p in paths if is_windows_reserved_name(p)]


def create_diff_result(
    content: str,
    entries: Sequence[StatusEntry],
    threshold: int = MAX_INPUT_TOKENS,
    binary_paths: Optional[Iterable[str]] = None,
) -> DiffResult:
    """Truncate *content* and attach categories and reserved-name info."""
    categories = categorize_files(entries, binary_paths)
    reserved = detect_reserved_files(categories.all_paths())
    truncation = truncate_diff(content, threshold)

    return DiffResult(
        content=truncation.content,
        metadata=DiffMetadata(
            file_count=len(entries),
            is_truncated=truncation.is_truncated,
            has_reserved_names=bool(reserved),
            original_tokens=truncation.original_tokens,
            truncated_tokens=truncation.truncated_tokens,
            reserved_files=tuple(reserved),
            categories=categories,
        ),
    )
