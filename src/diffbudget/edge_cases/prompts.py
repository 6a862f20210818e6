"""Prompt templates tailored to each edge case."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence, Tuple

from diffbudget.edge_cases.detector import EdgeCaseType, detect_edge_case
from diffbudget.git.models import FileCategories, RenamedFile

WHITESPACE_DIFF_PREVIEW_CHARS = 1000
MIXED_SUMMARY_MAX_NAMES = 3


@dataclass
class EdgeCasePromptOptions:
    diff: str
    language: str = "english"
    binary_files: Sequence[str] = field(default_factory=tuple)
    deleted_files: Sequence[str] = field(default_factory=tuple)
    renamed_files: Sequence[RenamedFile] = field(default_factory=tuple)
    categories: Optional[FileCategories] = None
    format_instruction: str = ""

    @classmethod
    def from_categories(
        cls,
        diff: str,
        categories: Optional[FileCategories],
        language: str = "english",
        format_instruction: str = "",
    ) -> "EdgeCasePromptOptions":
        if categories is None:
            return cls(diff=diff, language=language, format_instruction=format_instruction)
        return cls(
            diff=diff,
            language=language,
            format_instruction=format_instruction,
            binary_files=categories.binary,
            deleted_files=categories.deleted,
            renamed_files=categories.renamed,
            categories=categories,
        )


def _bullets(items: Sequence[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _whitespace_prompt(opts: EdgeCasePromptOptions) -> str:
    return (
        f"Generate a commit message in {opts.language} for the following changes "
        "that are primarily whitespace/formatting changes.\n"
        "\n"
        "The changes include:\n"
        "- Indentation adjustments\n"
        "- Trailing whitespace removal\n"
        "- Line ending normalization\n"
        "- Code formatting/style changes\n"
        "\n"
        "Please focus on describing the formatting improvements in the commit message.\n"
        "\n"
        "Git diff:\n"
        f"{opts.diff[:WHITESPACE_DIFF_PREVIEW_CHARS]}\n"
        "\n"
        "Note: Generate a concise commit message that accurately describes the "
        "whitespace/formatting changes."
    )


def _binary_prompt(opts: EdgeCasePromptOptions) -> str:
    if opts.binary_files:
        file_list = "Binary files changed:\n" + _bullets(opts.binary_files)
    else:
        file_list = "Binary files have been modified."
    return (
        f"Generate a commit message in {opts.language} for the following binary file changes.\n"
        "\n"
        f"{file_list}\n"
        "\n"
        "Please create a commit message that describes what binary files were changed "
        "and, if possible, infer the purpose from the file names.\n"
        "\n"
        "Note: Since binary files cannot be diffed, focus on the file names and any "
        "patterns you can identify."
    )


def _deletions_prompt(opts: EdgeCasePromptOptions) -> str:
    if opts.deleted_files:
        file_list = "Files deleted:\n" + _bullets(opts.deleted_files)
    else:
        file_list = "Files have been deleted."
    return (
        f"Generate a commit message in {opts.language} for the following file deletions.\n"
        "\n"
        f"{file_list}\n"
        "\n"
        "Please create a commit message that:\n"
        "1. Describes what was removed\n"
        "2. If possible, explains why (based on file names/patterns)\n"
        '3. Uses appropriate prefix (e.g., "refactor:", "chore:", "cleanup:")\n'
        "\n"
        "Note: Focus on describing the removal of these files and their likely purpose."
    )


def _renames_prompt(opts: EdgeCasePromptOptions) -> str:
    if opts.renamed_files:
        file_list = "Files renamed:\n" + _bullets(
            [f"{r.from_path} -> {r.to_path}" for r in opts.renamed_files]
        )
    else:
        file_list = "Files have been renamed."
    return (
        f"Generate a commit message in {opts.language} for the following file renames.\n"
        "\n"
        f"{file_list}\n"
        "\n"
        "Please create a commit message that:\n"
        "1. Describes the renaming pattern\n"
        '2. Uses appropriate prefix (e.g., "refactor:", "rename:", "chore:")\n'
        "3. Explains the naming convention improvement if apparent\n"
        "\n"
        "Note: Focus on describing the renaming changes and any organizational improvements."
    )


def _name_sample(paths: Sequence[str]) -> str:
    sample = ", ".join(paths[:MIXED_SUMMARY_MAX_NAMES])
    return sample + ("..." if len(paths) > MIXED_SUMMARY_MAX_NAMES else "")


def _mixed_prompt(opts: EdgeCasePromptOptions) -> str:
    cats = opts.categories
    if cats is None:
        return _default_prompt(EdgeCasePromptOptions(diff="mixed changes", language=opts.language))

    summary = []
    if cats.added:
        summary.append(f"Added {len(cats.added)} file(s): {_name_sample(cats.added)}")
    if cats.modified:
        summary.append(f"Modified {len(cats.modified)} file(s): {_name_sample(cats.modified)}")
    if cats.deleted:
        summary.append(f"Deleted {len(cats.deleted)} file(s): {_name_sample(cats.deleted)}")
    if cats.renamed:
        summary.append(f"Renamed {len(cats.renamed)} file(s)")
    if cats.binary:
        summary.append(f"Binary {len(cats.binary)} file(s)")

    return (
        f"Generate a commit message in {opts.language} for the following changes "
        "that include multiple types of operations.\n"
        "\n"
        "Change summary:\n"
        f"{_bullets(summary)}\n"
        "\n"
        "Please create a commit message that:\n"
        "1. Summarizes the overall purpose of the changes\n"
        "2. Uses an appropriate prefix based on the primary change type\n"
        "3. Provides context for why these related changes were made together\n"
        "\n"
        "Note: Focus on the cohesive purpose of these mixed changes."
    )


def _default_prompt(opts: EdgeCasePromptOptions) -> str:
    return (
        f"Generate a commit message in {opts.language} for the following changes.\n"
        "\n"
        "Git diff:\n"
        f"{opts.diff}\n"
        "\n"
        "Please create a clear and concise commit message."
    )


PROMPT_BUILDERS: Dict[EdgeCaseType, Callable[[EdgeCasePromptOptions], str]] = {
    EdgeCaseType.WHITESPACE_ONLY: _whitespace_prompt,
    EdgeCaseType.BINARY_FILES: _binary_prompt,
    EdgeCaseType.DELETIONS_ONLY: _deletions_prompt,
    EdgeCaseType.RENAMES_ONLY: _renames_prompt,
    EdgeCaseType.MIXED_OPERATIONS: _mixed_prompt,
}

DESCRIPTIONS: Dict[EdgeCaseType, str] = {
    EdgeCaseType.WHITESPACE_ONLY: "Changes contain only whitespace/formatting modifications",
    EdgeCaseType.BINARY_FILES: "Changes include binary files that cannot be diffed",
    EdgeCaseType.DELETIONS_ONLY: "Changes consist only of file deletions",
    EdgeCaseType.RENAMES_ONLY: "Changes consist only of file renames",
    EdgeCaseType.MIXED_OPERATIONS: "Changes include multiple operation types",
}


def create_edge_case_prompt(
    edge_case: Optional[EdgeCaseType],
    options: EdgeCasePromptOptions,
) -> str:
    """Build the prompt for *edge_case*; ``None`` gets the default template."""
    builder = PROMPT_BUILDERS.get(edge_case, _default_prompt)  # type: ignore[arg-type]
    prompt = builder(options)
    if options.format_instruction:
        prompt = (
            f"{prompt}\n\n"
            "The commit message should follow this format without any leading newlines:\n"
            f"{options.format_instruction}"
        )
    return prompt


def describe_edge_case(edge_case: Optional[EdgeCaseType]) -> str:
    if edge_case is None:
        return "Standard changes"
    return DESCRIPTIONS.get(edge_case, "Standard changes")


def select_prompt(
    diff: str,
    categories: Optional[FileCategories] = None,
    language: str = "english",
    format_instruction: str = "",
) -> Tuple[Optional[EdgeCaseType], str]:
    """Detect the edge case for *diff* and build its prompt in one step.

    A non-empty *format_instruction* is appended to whichever template is chosen.
    """
    edge_case = detect_edge_case(diff, categories)
    options = EdgeCasePromptOptions.from_categories(diff, categories, language, format_instruction)
    return edge_case, create_edge_case_prompt(edge_case, options)
