"""Priority-ordered packing of file diffs under a token budget."""

from __future__ import annotations

from typing import List, Sequence

from diffbudget.diff.models import AssembledDiffResult, ParsedFileDiff
from diffbudget.diff.priority import Priority, priority_label
from diffbudget.diff.tokens import estimate_tokens


def build_summary_header(files: Sequence[ParsedFileDiff]) -> str:
    """Render the change-summary header listing every file.

    An empty file list renders as an empty header.
    """
    if not files:
        return ""

    total_additions = sum(f.additions for f in files)
    total_deletions = sum(f.deletions for f in files)

    lines = [
        f"## Change Summary ({len(files)} files, +{total_additions}/-{total_deletions})",
        "",
    ]
    for f in files:
        lines.append(
            f"- {f.file_path} (+{f.additions}/-{f.deletions}){priority_label(f.priority)}"
        )
    lines.append("")
    return "\n".join(lines)


def assemble(
    files: Sequence[ParsedFileDiff],
    header: str,
    token_budget: int,
) -> AssembledDiffResult:
    """Greedily append file bodies, HIGH before LOW, while budget remains.

    EXCLUDE files never contribute a body. A file that does not fit goes to
    ``overflow_files`` and packing continues with the next one, but a LOW
    file is only ever considered after every HIGH file.
    """
    if not files:
        return AssembledDiffResult(content="", included_count=0, summary_only_count=0)

    remaining = token_budget - estimate_tokens(header)

    # sorted() is stable, so equal priorities keep their diff order.
    candidates = sorted(
        (f for f in files if f.priority != Priority.EXCLUDE),
        key=lambda f: f.priority,
        reverse=True,
    )

    bodies: List[str] = []
    overflow: List[ParsedFileDiff] = []
    for f in candidates:
        if f.token_count <= remaining:
            bodies.append(f.content)
            remaining -= f.token_count
        else:
            overflow.append(f)

    excluded = sum(1 for f in files if f.priority == Priority.EXCLUDE)

    return AssembledDiffResult(
        content=header + "".join(bodies),
        included_count=len(bodies),
        summary_only_count=len(overflow) + excluded,
        overflow_files=tuple(overflow),
    )
