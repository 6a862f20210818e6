"""Rich terminal reporter — per-file budget table, tier and secret warnings."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from diffbudget.diff.priority import Priority
from diffbudget.diff.tokens import estimate_tokens
from diffbudget.edge_cases.detector import EdgeCaseType
from diffbudget.edge_cases.prompts import describe_edge_case
from diffbudget.pipeline.processor import DiffProcessResult, DiffTier
from diffbudget.secrets.models import SecretDetectionResult

_PRIORITY_STYLE = {
    Priority.HIGH: "bold white on green",
    Priority.LOW: "bold black on yellow",
    Priority.EXCLUDE: "bold white on grey37",
}

_STATUS_STYLE = {
    "included": "green",
    "summarized": "cyan",
    "summary-only": "yellow",
    "excluded": "dim",
}

_TIER_LABEL = {
    DiffTier.NORMAL: "Tier 1: full diff",
    DiffTier.SMART_PRIORITIZED: "Tier 2: prioritized",
    DiffTier.MAP_REDUCE: "Tier 3: map-reduce",
}


def _priority_pill(priority: Priority) -> Text:
    return Text(f" {priority.name} ", style=_PRIORITY_STYLE.get(priority, ""))


def file_statuses(result: DiffProcessResult) -> List[str]:
    """Where each of ``result.files`` ended up in the processed payload, in order."""
    overflow = {o.file_path for o in result.overflow_files}
    overflow_status = "summarized" if result.tier == DiffTier.MAP_REDUCE else "summary-only"
    statuses: List[str] = []
    for f in result.files:
        if f.priority == Priority.EXCLUDE:
            statuses.append("excluded")
        elif f.file_path in overflow:
            statuses.append(overflow_status)
        else:
            statuses.append("included")
    return statuses


def render(
    result: DiffProcessResult,
    *,
    secrets: Optional[SecretDetectionResult] = None,
    edge_case: Optional[EdgeCaseType] = None,
    show_files: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print a processing summary to the terminal using Rich."""
    console = console or Console(stderr=True)

    console.print()
    console.print(f"[bold]{_TIER_LABEL[result.tier]}[/bold]")

    if show_files and result.files:
        table = Table(
            title="Diff Budget",
            show_lines=False,
            title_style="bold",
            border_style="dim",
        )
        table.add_column("Priority", justify="center", width=10)
        table.add_column("File", style="magenta", min_width=20)
        table.add_column("+/-", justify="right")
        table.add_column("Tokens", justify="right", style="green")
        table.add_column("Status")

        for f, status in zip(result.files, file_statuses(result)):
            table.add_row(
                _priority_pill(f.priority),
                f.file_path,
                f"+{f.additions}/-{f.deletions}",
                str(f.token_count),
                Text(status, style=_STATUS_STYLE.get(status, "")),
            )
        console.print(table)

    _print_summary(console, result, edge_case)

    if secrets is not None and secrets.has_potential_secrets:
        console.print()
        console.print(
            "[bold yellow]⚠️  Possible credentials in the payload:[/bold yellow] "
            + ", ".join(secrets.matched_pattern_ids)
        )
        console.print("[dim]Review before sending this diff to an external model.[/dim]")


def _print_summary(
    console: Console,
    result: DiffProcessResult,
    edge_case: Optional[EdgeCaseType],
) -> None:
    console.print()
    if result.total_files:
        console.print(f"[dim]Files:[/dim]          {result.total_files}")
        console.print(f"[dim]Included:[/dim]       {result.included_files}")
        console.print(f"[dim]Summary-only:[/dim]   {result.excluded_files}")
    if result.is_truncated:
        console.print("[dim]Truncated:[/dim]      yes")
    console.print(f"[dim]Payload tokens:[/dim] ~{estimate_tokens(result.processed_diff)}")
    if edge_case is not None:
        console.print(f"[dim]Edge case:[/dim]      {edge_case.value} ({describe_edge_case(edge_case)})")
