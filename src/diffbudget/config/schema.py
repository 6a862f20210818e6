"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from diffbudget.diff.tokens import MAP_REDUCE_CHUNK_SIZE, MAX_INPUT_TOKENS

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class BudgetConfig:
    max_input_tokens: int = MAX_INPUT_TOKENS
    chunk_size: int = MAP_REDUCE_CHUNK_SIZE  # map-reduce chunk token limit
    include_summary_header: bool = True


@dataclass
class SecretsConfig:
    enabled: bool = True
    max_matches: int = 5
    disable: List[str] = field(default_factory=list)
    patterns_dir: str = ".diffbudget-patterns"


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_files: bool = True


@dataclass
class PromptConfig:
    language: str = "english"
    conventional_commits: bool = True
    scope_hint: bool = True
    max_scope_length: Optional[int] = None


@dataclass
class DiffBudgetConfig:
    version: str = "1.0"
    budget: BudgetConfig = field(default_factory=BudgetConfig)
    secrets: SecretsConfig = field(default_factory=SecretsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    prompt: PromptConfig = field(default_factory=PromptConfig)
