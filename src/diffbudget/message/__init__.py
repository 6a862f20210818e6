"""Post-processing of generated messages and prompt format hints."""

from diffbudget.message.sanitizer import (
    SanitizeOptions,
    contains_dangerous_patterns,
    escape_shell_metacharacters,
    is_commit_message_safe,
    normalize_typography,
    remove_control_characters,
    remove_markdown_code_blocks,
    sanitize,
)
from diffbudget.message.scope import (
    build_format_instruction,
    conventional_commits_format,
    generate_scope_hint,
    traditional_format,
)

__all__ = [
    "SanitizeOptions",
    "build_format_instruction",
    "contains_dangerous_patterns",
    "conventional_commits_format",
    "escape_shell_metacharacters",
    "generate_scope_hint",
    "is_commit_message_safe",
    "normalize_typography",
    "remove_control_characters",
    "remove_markdown_code_blocks",
    "sanitize",
    "traditional_format",
]
