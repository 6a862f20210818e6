"""String-level fallback when no per-file structure is available."""

from __future__ import annotations

import re

from diffbudget.diff.models import TruncationResult
from diffbudget.diff.tokens import CHARS_PER_TOKEN, MAX_INPUT_TOKENS, estimate_tokens

LINE_BOUNDARY_SEARCH_RANGE = 200

_FILE_BOUNDARY_RE = re.compile(r"\ndiff --git ")


def truncate_diff(diff: str, threshold: int = MAX_INPUT_TOKENS) -> TruncationResult:
    """Cut *diff* to roughly *threshold* tokens.

    Prefers the last file boundary before the target length, provided it
    lies past the halfway mark, then advances to the next newline (if one is
    within ``LINE_BOUNDARY_SEARCH_RANGE``) so no line is split.
    """
    original_tokens = estimate_tokens(diff)
    if original_tokens <= threshold:
        return TruncationResult(content=diff, is_truncated=False)

    target = max(threshold, 0) * CHARS_PER_TOKEN
    cut = target

    last_boundary = None
    for m in _FILE_BOUNDARY_RE.finditer(diff):
        if m.start() >= target:
            break
        last_boundary = m.start()

    if last_boundary is not None and last_boundary > target * 0.5:
        cut = last_boundary

    next_newline = diff.find("\n", cut)
    if next_newline != -1 and next_newline < cut + LINE_BOUNDARY_SEARCH_RANGE:
        cut = next_newline + 1

    content = diff[:cut]
    return TruncationResult(
        content=content,
        is_truncated=True,
        original_tokens=original_tokens,
        truncated_tokens=estimate_tokens(content),
    )
