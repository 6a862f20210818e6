"""Advisory credential detection for text bound for an external model."""

from diffbudget.secrets.builtin import ALL_BUILTIN_PATTERNS
from diffbudget.secrets.models import SecretDetectionResult, SecretPattern
from diffbudget.secrets.registry import PatternRegistry, build_registry
from diffbudget.secrets.scanner import DEFAULT_MAX_MATCHES, scan_for_secrets

__all__ = [
    "ALL_BUILTIN_PATTERNS",
    "DEFAULT_MAX_MATCHES",
    "PatternRegistry",
    "SecretDetectionResult",
    "SecretPattern",
    "build_registry",
    "scan_for_secrets",
]
