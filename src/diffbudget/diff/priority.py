"""File priority classification — lock files, generated output, source."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import List


class Priority(IntEnum):
    """Inclusion tier for a file's diff body."""

    EXCLUDE = 0  # lock files: summary line only, never a body
    LOW = 1  # generated / build output: packed after HIGH
    HIGH = 2  # everything else


LOCK_FILE_NAMES: tuple[str, ...] = (
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "pnpm-lock.json",
    "Gemfile.lock",
    "Cargo.lock",
    "poetry.lock",
    "composer.lock",
    "go.sum",
    "Pipfile.lock",
    "bun.lockb",
    "shrinkwrap.yaml",
    "packages.lock.json",
    "flake.lock",
)

# Matched against the '/'-normalised path.
LOW_PRIORITY_PATTERNS: List[re.Pattern[str]] = [
    re.compile(p)
    for p in (
        r"\.min\.(?:js|css)$",
        r"\.d\.ts$",
        r"\.snap$",
        r"\.map$",
        r"\.generated\.",
        r"(?:^|/)dist/",
        r"(?:^|/)build/",
        r"(?:^|/)out/",
        r"(?:^|/)coverage/",
        r"(?:^|/)__snapshots__/",
    )
]

_PRIORITY_LABELS = {
    Priority.EXCLUDE: " [LOCK]",
    Priority.LOW: " [generated]",
    Priority.HIGH: "",
}


def _normalise(path: str) -> str:
    return path.replace("\\", "/")


def is_lock_file(path: str) -> bool:
    basename = _normalise(path).rsplit("/", 1)[-1]
    return basename in LOCK_FILE_NAMES


def is_low_priority_file(path: str) -> bool:
    normalised = _normalise(path)
    return any(p.search(normalised) for p in LOW_PRIORITY_PATTERNS)


def classify(path: str) -> Priority:
    """Return the priority tier for *path*.

    The lock-file check runs first so ``dist/package-lock.json`` is EXCLUDE,
    not LOW.
    """
    if is_lock_file(path):
        return Priority.EXCLUDE
    if is_low_priority_file(path):
        return Priority.LOW
    return Priority.HIGH


def priority_label(priority: Priority) -> str:
    """Trailing tag used in the change-summary header."""
    return _PRIORITY_LABELS[priority]
