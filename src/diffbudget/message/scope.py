"""Conventional Commits scope hints derived from changed paths."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

GENERIC_DIRECTORIES = frozenset(["src", "lib", "app", "dist", "build", "out", "node_modules"])


def generate_scope_hint(paths: Iterable[str]) -> str:
    """Most common meaningful top directory across *paths*, or ``""``.

    For each path the first segment that is not a generic directory, has no
    dot, and is not the file name itself is counted. Ties go to the
    directory seen first.
    """
    counts: Counter[str] = Counter()
    for path in paths:
        parts = path.replace("\\", "/").split("/")
        filename = parts[-1]
        for part in parts:
            if part.lower() in GENERIC_DIRECTORIES or "." in part or part == filename:
                continue
            counts[part] += 1
            break

    if not counts:
        return ""
    return counts.most_common(1)[0][0]


def conventional_commits_format(scope_hint: Optional[str] = None) -> str:
    """Format instruction asking for ``<type>(<scope>): <subject>``."""
    guidance = ""
    if scope_hint:
        guidance = (
            f'\n\nBased on the changed files, consider using "{scope_hint}" as the scope, '
            "or choose a more appropriate scope if the changes suggest otherwise."
        )
    return (
        "<type>(<scope>): <subject>\n"
        "\n"
        "Where:\n"
        "- <type> is one of the prefixes listed above\n"
        "- <scope> is optional but recommended - it should indicate the area of the "
        "codebase affected (e.g., auth, ui, api, docs)\n"
        "- If the scope cannot be determined or changes are too broad, you may omit it "
        "and use: <type>: <subject>\n"
        f"- <subject> is a brief description of the change{guidance}"
    )


def traditional_format(scope_hint: Optional[str] = None) -> str:
    if scope_hint:
        return (
            f"<prefix>({scope_hint}): <subject>\n"
            "\n"
            "Where:\n"
            "- <prefix> is one of the prefixes listed above\n"
            f"- ({scope_hint}) is the scope indicating the affected area\n"
            "- <subject> is a brief description of the change"
        )
    return (
        "<prefix>: <subject>\n"
        "\n"
        "Where:\n"
        "- <prefix> is one of the prefixes listed above\n"
        "- <subject> is a brief description of the change"
    )


def build_format_instruction(
    paths: Iterable[str],
    conventional: bool = True,
    scope_hint: bool = True,
    max_scope_length: Optional[int] = None,
) -> str:
    """Format instruction for a commit prompt over the changed *paths*.

    A hint longer than *max_scope_length* is dropped rather than cut short.
    """
    hint = generate_scope_hint(paths) if scope_hint else ""
    if max_scope_length is not None and len(hint) > max_scope_length:
        hint = ""
    if conventional:
        return conventional_commits_format(hint)
    return traditional_format(hint)
