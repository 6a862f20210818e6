"""Secret pattern model — regex stored as string, compiled on first use."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class SecretPattern:
    """A single named credential pattern.

    ``pattern`` is kept as a raw string so custom patterns stay serialisable;
    ``compiled_pattern`` compiles it once and caches the result.
    """

    id: str
    pattern: str
    category: str = "token"  # token | key | cloud | connection | env_reference
    ignore_case: bool = False
    description: str = ""
    enabled: bool = True

    _compiled: Optional[re.Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def compiled_pattern(self) -> re.Pattern[str]:
        if self._compiled is None:
            flags = re.IGNORECASE if self.ignore_case else 0
            self._compiled = re.compile(self.pattern, flags)
        return self._compiled

    def matches(self, text: str) -> bool:
        return self.compiled_pattern.search(text) is not None


@dataclass(frozen=True)
class SecretDetectionResult:
    """Pattern ids that matched, in pattern-table order."""

    has_potential_secrets: bool = False
    matched_pattern_ids: Tuple[str, ...] = ()
