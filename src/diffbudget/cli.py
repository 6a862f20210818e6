"""diffbudget CLI — Typer application with prepare, scan, classify, edge-case, sanitize and init."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from diffbudget import __version__
from diffbudget.config import ConfigError, DiffBudgetConfig, load_config
from diffbudget.git.adapter import GitError
from diffbudget.git.models import FileCategories

app = typer.Typer(
    name="diffbudget",
    help="Fit large git diffs into an LLM token budget.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

logger = logging.getLogger("diffbudget")


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=debug, markup=False)],
        force=True,
    )


def _find_repo_root() -> Optional[Path]:
    """Return the git repo root, or None outside a repository."""
    from diffbudget.git.adapter import get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        logger.debug("Not inside a git repository: %s", exc)
        return None


def _require_repo_root() -> Path:
    """Return the git repo root; exit 2 outside a repository."""
    from diffbudget.git.adapter import get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load_config(repo_root: Optional[Path], override: Optional[str]) -> DiffBudgetConfig:
    try:
        return load_config(repo_root or Path.cwd(), override)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _read_text(source: str) -> str:
    """Read *source*, where ``-`` means stdin."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        console.print(f"[bold red]Error:[/bold red] file not found: {source}")
        raise typer.Exit(code=2)
    return path.read_text(encoding="utf-8", errors="replace")


def _collect_diff(
    file: Optional[str],
    base: Optional[str],
    head: str,
) -> Tuple[str, Optional[Path], Optional[FileCategories]]:
    """Return (diff, repo_root, categories) from a file/stdin or from git."""
    if file:
        return _read_text(file), _find_repo_root(), None

    from diffbudget.git.adapter import (
        get_binary_files,
        get_range_diff,
        get_staged_diff,
        get_status_entries,
    )
    from diffbudget.git.categorize import categorize_files, detect_reserved_files

    repo_root = _require_repo_root()
    try:
        if base:
            return get_range_diff(repo_root, base, head), repo_root, None
        diff_text = get_staged_diff(repo_root)
        entries = [e for e in get_status_entries(repo_root) if e.index_status not in (" ", "?")]
        binaries = get_binary_files(repo_root, staged=True)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    categories = categorize_files(entries, binary_paths=binaries)
    reserved = detect_reserved_files(categories.all_paths())
    if reserved:
        console.print(
            "[yellow]⚠[/yellow]  Windows reserved file names staged: " + ", ".join(reserved)
        )
    return diff_text, repo_root, categories


def _check_format(fmt: Optional[str], cfg: DiffBudgetConfig) -> str:
    from diffbudget.config.schema import OUTPUT_FORMATS

    if fmt is None:
        return cfg.output.format
    if fmt not in OUTPUT_FORMATS:
        console.print(f"[bold red]Invalid format:[/bold red] {fmt}")
        raise typer.Exit(code=2)
    return fmt


# ── prepare ───────────────────────────────────────────────────────────────────


@app.command()
def prepare(
    file: Optional[str] = typer.Option(None, "--file", "-i", help="Read the diff from a file ('-' for stdin) instead of git"),
    base: Optional[str] = typer.Option(None, "--base", help="Diff base...head instead of staged changes"),
    head: str = typer.Option("HEAD", "--head", help="Head ref used with --base"),
    budget: Optional[int] = typer.Option(None, "--budget", "-b", min=1, help="Token budget for the payload"),
    operation: Optional[str] = typer.Option(None, "--operation", help="commit_message | pr_title | pr_body | issue"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .diffbudget.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the payload to a file"),
) -> None:
    """Budget a diff for prompting: prioritise, pack, and flag credentials."""
    from diffbudget.diff.tokens import OperationKind, get_max_input_tokens, output_tokens_for
    from diffbudget.edge_cases.detector import detect_edge_case
    from diffbudget.output import json_report, terminal
    from diffbudget.pipeline.processor import DiffProcessor
    from diffbudget.secrets.registry import build_registry
    from diffbudget.secrets.scanner import scan_for_secrets

    diff_text, repo_root, categories = _collect_diff(file, base, head)
    cfg = _load_config(repo_root, config)
    fmt = _check_format(format, cfg)

    if not diff_text.strip():
        console.print("[dim]No changes to prepare.[/dim]")
        raise typer.Exit(code=0)

    token_budget = budget or cfg.budget.max_input_tokens
    if operation:
        try:
            kind = OperationKind(operation)
        except ValueError:
            console.print(f"[bold red]Invalid operation:[/bold red] {operation}")
            raise typer.Exit(code=2)
        token_budget = min(token_budget, get_max_input_tokens(output_tokens_for(kind)))
    logger.info("Token budget: %d", token_budget)

    result = DiffProcessor(cfg, language=cfg.prompt.language).process(diff_text, token_budget)
    edge_case = detect_edge_case(diff_text, categories)

    secrets = None
    if cfg.secrets.enabled:
        try:
            registry = build_registry(cfg, repo_root)
        except ConfigError as exc:
            console.print(f"[bold red]Config error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
        secrets = scan_for_secrets(
            result.processed_diff,
            max_matches=cfg.secrets.max_matches,
            patterns=registry.enabled_patterns(),
        )

    if fmt == "json":
        report_text = json_report.render(result, secrets=secrets, edge_case=edge_case)
        if output:
            Path(output).write_text(report_text, encoding="utf-8")
        else:
            print(report_text)
        return

    terminal.render(
        result,
        secrets=secrets,
        edge_case=edge_case,
        show_files=cfg.output.show_files,
        console=console,
    )
    if output:
        Path(output).write_text(result.processed_diff, encoding="utf-8")
        console.print(f"[green]✓[/green] Payload written to {output}")
    else:
        print(result.processed_diff)


# ── scan ──────────────────────────────────────────────────────────────────────


@app.command()
def scan(
    file: Optional[str] = typer.Option(None, "--file", "-i", help="Scan a file ('-' for stdin) instead of the staged diff"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .diffbudget.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    max_matches: Optional[int] = typer.Option(None, "--max-matches", help="Stop after this many pattern matches"),
    warn_only: bool = typer.Option(False, "--warn-only", help="Report matches but exit 0"),
) -> None:
    """Check text bound for an external model for likely credentials."""
    import json

    from diffbudget.secrets.registry import build_registry
    from diffbudget.secrets.scanner import scan_for_secrets

    text, repo_root, _ = _collect_diff(file, None, "HEAD")
    cfg = _load_config(repo_root, config)
    fmt = _check_format(format, cfg)

    try:
        registry = build_registry(cfg, repo_root)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    logger.info("Secret patterns loaded: %d", len(registry.enabled_patterns()))

    limit = cfg.secrets.max_matches if max_matches is None else max_matches
    result = scan_for_secrets(text, max_matches=limit, patterns=registry.enabled_patterns())

    if fmt == "json":
        print(json.dumps({
            "has_potential_secrets": result.has_potential_secrets,
            "matched_pattern_ids": list(result.matched_pattern_ids),
        }, indent=2))
    elif result.has_potential_secrets:
        console.print("[bold yellow]⚠️  Possible credentials detected:[/bold yellow]")
        for pattern_id in result.matched_pattern_ids:
            console.print(f"  [cyan]{pattern_id}[/cyan]")
    else:
        console.print("[bold green]✅ No credential patterns matched.[/bold green]")

    if result.has_potential_secrets and not warn_only:
        raise typer.Exit(code=1)


# ── classify ──────────────────────────────────────────────────────────────────


@app.command()
def classify(
    paths: List[str] = typer.Argument(..., help="File paths to classify"),
) -> None:
    """Show the budget priority assigned to each path."""
    from diffbudget.diff.priority import classify as classify_path

    table = Table(show_header=True, border_style="dim")
    table.add_column("Path", style="magenta")
    table.add_column("Priority", justify="center")
    for path in paths:
        table.add_row(path, classify_path(path).name)
    Console().print(table)


# ── edge-case ─────────────────────────────────────────────────────────────────


@app.command("edge-case")
def edge_case(
    file: Optional[str] = typer.Option(None, "--file", "-i", help="Read the diff from a file ('-' for stdin) instead of git"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Target language for the message"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .diffbudget.toml"),
) -> None:
    """Detect the change pattern and print the prompt selected for it."""
    from diffbudget.diff.parser import extract_file_paths
    from diffbudget.edge_cases.prompts import describe_edge_case, select_prompt
    from diffbudget.message.scope import build_format_instruction

    diff_text, repo_root, categories = _collect_diff(file, None, "HEAD")
    cfg = _load_config(repo_root, config)

    instruction = build_format_instruction(
        extract_file_paths(diff_text),
        conventional=cfg.prompt.conventional_commits,
        scope_hint=cfg.prompt.scope_hint,
        max_scope_length=cfg.prompt.max_scope_length,
    )
    detected, prompt = select_prompt(
        diff_text, categories, language or cfg.prompt.language, format_instruction=instruction
    )
    label = detected.value if detected is not None else "none"
    console.print(f"[bold]Edge case:[/bold] {label} [dim]({describe_edge_case(detected)})[/dim]")
    print(prompt)


# ── sanitize ──────────────────────────────────────────────────────────────────


@app.command()
def sanitize(
    file: str = typer.Argument("-", help="File with the generated message ('-' for stdin)"),
    no_escape: bool = typer.Option(False, "--no-escape", help="Keep $( ${ and backticks as-is"),
    no_typography: bool = typer.Option(False, "--no-typography", help="Keep smart quotes and dashes"),
    no_control: bool = typer.Option(False, "--no-control", help="Keep control characters"),
) -> None:
    """Clean a generated commit message for safe use with git."""
    from diffbudget.message.sanitizer import SanitizeOptions, sanitize as run_sanitize

    options = SanitizeOptions(
        escape_shell_metachars=not no_escape,
        normalize_typography=not no_typography,
        remove_control_chars=not no_control,
    )
    print(run_sanitize(_read_text(file), options))


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .diffbudget.toml in the repo root."""
    from diffbudget.config import CONFIG_FILENAME
    from diffbudget.config.defaults import DEFAULT_TOML

    repo_root = _require_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"diffbudget {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log tier decisions"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """diffbudget — fit large git diffs into an LLM token budget."""
    _configure_logging(verbose, debug)
