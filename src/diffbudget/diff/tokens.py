"""Token estimation and fixed budget constants.

Token counts throughout diffbudget are *estimates* (characters / 4), not the
vendor tokenizer's units. Every budget constant below is expressed in those
estimated units; swapping in a real tokenizer means re-deriving them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

CHARS_PER_TOKEN = 4

MAX_INPUT_TOKENS = 200 * 1000
CONTEXT_LIMIT = 400 * 1000
REASONING_BUFFER = 10 * 1000
MAP_REDUCE_CHUNK_SIZE = 80 * 1000
SUMMARIZATION_OUTPUT_TOKENS = 2000
SAFETY_MARGIN = 0.95

# Passed through to the completion call unchanged.
REASONING_EFFORT = "low"


class OperationKind(str, Enum):
    COMMIT_MESSAGE = "commit_message"
    PR_TITLE = "pr_title"
    PR_BODY = "pr_body"
    ISSUE = "issue"


@dataclass(frozen=True)
class OutputTokenAllocations:
    """Reply budgets per generated artefact (CJK output needs the headroom)."""

    commit_message: int = 4000
    pr_title: int = 500
    pr_body: int = 8000
    issue: int = 12000


OUTPUT_TOKENS = OutputTokenAllocations()


def estimate_tokens(text: str) -> int:
    """Return ``ceil(len(text) / CHARS_PER_TOKEN)``; 0 for empty text."""
    if not text:
        return 0
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def output_tokens_for(kind: OperationKind | str) -> int:
    """Look up the reply budget for *kind*."""
    return getattr(OUTPUT_TOKENS, OperationKind(kind).value)


def truncate_input(text: str, max_tokens: int) -> str:
    """Hard character cut to *max_tokens*; no boundary awareness."""
    if estimate_tokens(text) <= max_tokens:
        return text
    return text[: max(max_tokens, 0) * CHARS_PER_TOKEN]


def validate_allocation(input_tokens: int, output_tokens: int) -> bool:
    """True if input + output + reasoning buffer fits the context window."""
    return input_tokens + output_tokens + REASONING_BUFFER <= CONTEXT_LIMIT


def get_max_input_tokens(output_tokens: int) -> int:
    """Largest safe input for a given reply allocation."""
    return min(MAX_INPUT_TOKENS, CONTEXT_LIMIT - output_tokens - REASONING_BUFFER)
