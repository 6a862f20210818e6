"""Scan AI-bound text for common API key and token formats."""

from __future__ import annotations

from typing import Iterable, Optional

from diffbudget.secrets.builtin import ALL_BUILTIN_PATTERNS
from diffbudget.secrets.models import SecretDetectionResult, SecretPattern

DEFAULT_MAX_MATCHES = 5


def scan_for_secrets(
    text: str,
    max_matches: int = DEFAULT_MAX_MATCHES,
    patterns: Optional[Iterable[SecretPattern]] = None,
) -> SecretDetectionResult:
    """Test *text* against each pattern in order.

    Collects matching pattern ids until *max_matches* is reached. Matches are
    advisory; the caller decides whether to continue.
    """
    if not text or max_matches <= 0:
        return SecretDetectionResult()

    if patterns is None:
        patterns = ALL_BUILTIN_PATTERNS

    matched: list[str] = []
    for pattern in patterns:
        if not pattern.enabled:
            continue
        if pattern.matches(text):
            matched.append(pattern.id)
            if len(matched) >= max_matches:
                break

    return SecretDetectionResult(
        has_potential_secrets=bool(matched),
        matched_pattern_ids=tuple(matched),
    )
