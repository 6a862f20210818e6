"""Diff parsing, priority classification, budgeted assembly, truncation."""

from diffbudget.diff.assembler import assemble, build_summary_header
from diffbudget.diff.models import AssembledDiffResult, ParsedFileDiff, TruncationResult
from diffbudget.diff.parser import extract_file_paths, parse_diff_into_files
from diffbudget.diff.priority import Priority, classify
from diffbudget.diff.tokens import (
    CHARS_PER_TOKEN,
    MAX_INPUT_TOKENS,
    OUTPUT_TOKENS,
    REASONING_EFFORT,
    OperationKind,
    estimate_tokens,
)
from diffbudget.diff.truncator import truncate_diff

__all__ = [
    "AssembledDiffResult",
    "CHARS_PER_TOKEN",
    "MAX_INPUT_TOKENS",
    "OUTPUT_TOKENS",
    "OperationKind",
    "ParsedFileDiff",
    "Priority",
    "REASONING_EFFORT",
    "TruncationResult",
    "assemble",
    "build_summary_header",
    "classify",
    "estimate_tokens",
    "extract_file_paths",
    "parse_diff_into_files",
    "truncate_diff",
]
