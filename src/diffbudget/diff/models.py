"""Data models for parsed and assembled diffs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from diffbudget.diff.priority import Priority


@dataclass(frozen=True, slots=True)
class ParsedFileDiff:
    """One file's section of a unified diff."""

    file_path: str
    content: str  # verbatim slice: 'diff --git' header through last hunk
    additions: int
    deletions: int
    token_count: int
    priority: Priority


@dataclass(frozen=True)
class AssembledDiffResult:
    """Summary header plus the file bodies that fit the budget."""

    content: str
    included_count: int
    summary_only_count: int
    overflow_files: Tuple[ParsedFileDiff, ...] = ()


@dataclass(frozen=True)
class TruncationResult:
    """Outcome of the string-level fallback."""

    content: str
    is_truncated: bool
    original_tokens: Optional[int] = None
    truncated_tokens: Optional[int] = None
