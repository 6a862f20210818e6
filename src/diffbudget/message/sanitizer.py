"""Clean model output before it becomes a commit message, PR title or body."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# `$` immediately (or through a run of `$`/control chars) before `(` or `{`
_SHELL_DOLLAR_RE = re.compile(r"\$(?=[$\x00-\x08\x0b\x0c\x0e-\x1f\x7f]*[({])")
_BACKTICK_SPAN_RE = re.compile(r"`([^`]*)`")

_FENCE_OPEN_LINE_RE = re.compile(r"^```[a-zA-Z]*\s*\n", re.MULTILINE)
_FENCE_CLOSE_LINE_RE = re.compile(r"\n```$", re.MULTILINE)
_FENCE_OPEN_START_RE = re.compile(r"^```[a-zA-Z]*\s*")
_FENCE_CLOSE_END_RE = re.compile(r"\s*```\Z")

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

_TYPOGRAPHY = str.maketrans(
    {
        "“": '"',
        "”": '"',
        "‘": "'",
        "’": "'",
        "—": "-",
        "–": "-",
        "…": "...",
    }
)

_DANGEROUS_PATTERNS = (
    re.compile(r"\$\([^)]*\)"),
    re.compile(r"\$\{[^}]*\}"),
    re.compile(r"`[^`]*`"),
)


@dataclass(frozen=True)
class SanitizeOptions:
    escape_shell_metachars: bool = True
    normalize_typography: bool = True
    remove_control_chars: bool = True
    preserve_unicode: bool = True  # non-typographic unicode is never touched


DEFAULT_OPTIONS = SanitizeOptions()


def remove_markdown_code_blocks(text: str) -> str:
    """Strip ``` fences (with optional language tag), keeping their content."""
    result = _FENCE_OPEN_LINE_RE.sub("", text)
    result = _FENCE_CLOSE_LINE_RE.sub("", result)
    result = _FENCE_OPEN_START_RE.sub("", result)
    return _FENCE_CLOSE_END_RE.sub("", result)


def escape_shell_metacharacters(text: str) -> str:
    """Neutralise ``$(``, ``${`` and backticks.

    ``$`` becomes ``(dollar)`` and backtick spans become single-quoted.
    """
    result = _SHELL_DOLLAR_RE.sub("(dollar)", text)
    result = _BACKTICK_SPAN_RE.sub(r"'\1'", result)
    return result.replace("`", "'")


def normalize_typography(text: str) -> str:
    """Smart quotes, dashes and the ellipsis character to ASCII."""
    return text.translate(_TYPOGRAPHY)


def remove_control_characters(text: str) -> str:
    """Drop C0 control chars and DEL; tab, newline and CR survive."""
    return _CONTROL_CHARS_RE.sub("", text)


def _normalize_whitespace(text: str) -> str:
    result = text.strip()
    result = re.sub(r"\n{3,}", "\n\n", result)
    return re.sub(r"\n\s*\n", "\n\n", result)


def _strip_subject_period(text: str) -> str:
    first, sep, rest = text.partition("\n")
    # a single period only; runs of dots are left alone
    if first.endswith(".") and not first.endswith(".."):
        first = first[:-1]
    return first + sep + rest


def _sanitize_once(text: str, opts: SanitizeOptions) -> str:
    result = remove_markdown_code_blocks(text)
    if opts.escape_shell_metachars:
        result = escape_shell_metacharacters(result)
    if opts.normalize_typography:
        result = normalize_typography(result)
    if opts.remove_control_chars:
        result = remove_control_characters(result)
    result = _normalize_whitespace(result)
    return _strip_subject_period(result)


def sanitize(message: str, options: Optional[SanitizeOptions] = None) -> str:
    """Run the sanitisation pipeline until the text stops changing.

    Trimming can expose a new trailing period or fence; repeating the pass
    makes ``sanitize(sanitize(x)) == sanitize(x)`` hold for any input.
    Every step only removes characters or replaces ``$``/backticks/typographic
    characters, so the loop terminates.
    """
    opts = options or DEFAULT_OPTIONS
    result = message
    while True:
        updated = _sanitize_once(result, opts)
        if updated == result:
            return result
        result = updated


def contains_dangerous_patterns(text: str) -> bool:
    """True for ``$(...)``, ``${...}`` or a backtick span."""
    return any(p.search(text) for p in _DANGEROUS_PATTERNS)


def is_commit_message_safe(message: str) -> bool:
    if _CONTROL_CHARS_RE.search(message):
        return False
    return not contains_dangerous_patterns(message)
