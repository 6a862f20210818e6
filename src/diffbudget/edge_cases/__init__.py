"""Edge-case detection and specialised prompt selection."""

from diffbudget.edge_cases.detector import (
    EdgeCaseType,
    detect_edge_case,
    is_whitespace_only_diff,
)
from diffbudget.edge_cases.prompts import (
    EdgeCasePromptOptions,
    create_edge_case_prompt,
    describe_edge_case,
    select_prompt,
)

__all__ = [
    "EdgeCasePromptOptions",
    "EdgeCaseType",
    "create_edge_case_prompt",
    "describe_edge_case",
    "detect_edge_case",
    "is_whitespace_only_diff",
    "select_prompt",
]
