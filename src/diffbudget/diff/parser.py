"""Split a unified diff into per-file sections.

Each section runs from its ``diff --git`` header up to the next header (or
end of input) and is kept verbatim, so concatenating every section's
content reproduces the diff from the first header onwards.
"""

from __future__ import annotations

import re
from typing import List

from diffbudget.diff.models import ParsedFileDiff
from diffbudget.diff.priority import classify
from diffbudget.diff.tokens import estimate_tokens

_DIFF_HEADER_RE = re.compile(r"^diff --git a/(.+?) b/.+$", re.MULTILINE)


def _count_changes(content: str) -> tuple[int, int]:
    additions = 0
    deletions = 0
    for line in content.split("\n"):
        if line.startswith("+") and not line.startswith("+++"):
            additions += 1
        elif line.startswith("-") and not line.startswith("---"):
            deletions += 1
    return additions, deletions


def parse_diff_into_files(raw_diff: str) -> List[ParsedFileDiff]:
    """Return one ParsedFileDiff per file header, in diff order.

    Empty or header-less input yields an empty list.
    """
    if not raw_diff or not raw_diff.strip():
        return []

    headers = [(m.start(), m.group(1)) for m in _DIFF_HEADER_RE.finditer(raw_diff)]
    if not headers:
        return []

    files: List[ParsedFileDiff] = []
    for i, (start, path) in enumerate(headers):
        end = headers[i + 1][0] if i + 1 < len(headers) else len(raw_diff)
        content = raw_diff[start:end]
        additions, deletions = _count_changes(content)
        files.append(
            ParsedFileDiff(
                file_path=path,
                content=content,
                additions=additions,
                deletions=deletions,
                token_count=estimate_tokens(content),
                priority=classify(path),
            )
        )
    return files


def extract_file_paths(diff: str) -> List[str]:
    """Paths from every ``diff --git`` header, in order."""
    if not diff:
        return []
    return [m.group(1) for m in _DIFF_HEADER_RE.finditer(diff)]
