"""Classify a diff into one of the special change patterns."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from diffbudget.git.models import FileCategories

_WHITESPACE_RE = re.compile(r"\s")


class EdgeCaseType(str, Enum):
    WHITESPACE_ONLY = "whitespace-only"
    BINARY_FILES = "binary-files"
    DELETIONS_ONLY = "deletions-only"
    RENAMES_ONLY = "renames-only"
    MIXED_OPERATIONS = "mixed-operations"


def detect_edge_case(
    diff: str,
    categories: Optional[FileCategories] = None,
) -> Optional[EdgeCaseType]:
    """Return the edge case *diff* falls into, or ``None`` for a normal diff.

    Checks run in a fixed order: binary marker, whitespace-only, then the
    category-based cases when *categories* is given.
    """
    if "Binary files" in diff and " differ" in diff:
        return EdgeCaseType.BINARY_FILES

    if is_whitespace_only_diff(diff):
        return EdgeCaseType.WHITESPACE_ONLY

    if categories is not None:
        has_added = bool(categories.added)
        has_modified = bool(categories.modified)
        has_deleted = bool(categories.deleted)
        has_renamed = bool(categories.renamed)
        has_binary = bool(categories.binary)

        if has_deleted and not (has_added or has_modified or has_renamed or has_binary):
            return EdgeCaseType.DELETIONS_ONLY
        if has_renamed and not (has_added or has_modified or has_deleted or has_binary):
            return EdgeCaseType.RENAMES_ONLY
        if categories.non_empty_count >= 2:
            return EdgeCaseType.MIXED_OPERATIONS

    return None


def is_whitespace_only_diff(diff: str) -> bool:
    """True when added and removed lines differ only in whitespace.

    The comparison is over the concatenation of all added lines against the
    concatenation of all removed lines, so whitespace that moves content
    across line boundaries also counts.
    """
    if not diff or not diff.strip():
        return False

    added: list[str] = []
    removed: list[str] = []
    for line in diff.split("\n"):
        if line.startswith("+") and not line.startswith("+++"):
            added.append(line[1:])
        elif line.startswith("-") and not line.startswith("---"):
            removed.append(line[1:])

    if not added and not removed:
        return False

    added_content = "".join(_WHITESPACE_RE.sub("", line) for line in added)
    removed_content = "".join(_WHITESPACE_RE.sub("", line) for line in removed)
    return added_content == removed_content and len(added_content) > 0
