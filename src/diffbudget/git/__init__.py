"""Git interface layer — adapter, status categorisation, models."""

from diffbudget.git.adapter import (
    GitError,
    get_binary_files,
    get_range_diff,
    get_repo_root,
    get_staged_diff,
    get_status_entries,
    parse_porcelain_status,
)
from diffbudget.git.categorize import (
    categorize_files,
    create_diff_result,
    detect_reserved_files,
    generate_file_summary,
    is_windows_reserved_name,
)
from diffbudget.git.models import (
    DiffMetadata,
    DiffResult,
    FileCategories,
    RenamedFile,
    StatusEntry,
)

__all__ = [
    "DiffMetadata",
    "DiffResult",
    "FileCategories",
    "GitError",
    "RenamedFile",
    "StatusEntry",
    "categorize_files",
    "create_diff_result",
    "detect_reserved_files",
    "generate_file_summary",
    "get_binary_files",
    "get_range_diff",
    "get_repo_root",
    "get_staged_diff",
    "get_status_entries",
    "is_windows_reserved_name",
    "parse_porcelain_status",
]
