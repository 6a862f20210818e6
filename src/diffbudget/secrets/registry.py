"""Pattern registry — loads built-in and custom patterns, applies config filters."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from diffbudget.config.loader import ConfigError
from diffbudget.config.schema import DiffBudgetConfig
from diffbudget.secrets.models import SecretPattern

logger = logging.getLogger(__name__)


class PatternRegistry:
    """Ordered store of secret patterns. Registration order is scan order."""

    def __init__(self) -> None:
        self._patterns: Dict[str, SecretPattern] = {}

    # ---- registration ----

    def register(self, pattern: SecretPattern) -> None:
        if pattern.id in self._patterns:
            # re-registering replaces in place, keeping the original position
            logger.debug("Overriding secret pattern %s", pattern.id)
        self._patterns[pattern.id] = pattern

    def register_many(self, patterns: List[SecretPattern]) -> None:
        for p in patterns:
            self.register(p)

    # ---- queries ----

    @property
    def all_patterns(self) -> List[SecretPattern]:
        return list(self._patterns.values())

    def get(self, pattern_id: str) -> Optional[SecretPattern]:
        return self._patterns.get(pattern_id)

    def enabled_patterns(self) -> List[SecretPattern]:
        return [p for p in self._patterns.values() if p.enabled]

    def __len__(self) -> int:
        return len(self._patterns)

    # ---- config filtering ----

    def apply_config(self, config: DiffBudgetConfig) -> None:
        """Disable patterns listed in ``config.secrets.disable``."""
        disabled = set(config.secrets.disable)
        for pattern in self._patterns.values():
            if pattern.id in disabled:
                pattern.enabled = False
        unknown = disabled - set(self._patterns)
        if unknown:
            logger.warning("Unknown secret pattern ids in disable list: %s", ", ".join(sorted(unknown)))

    # ---- custom pattern loading ----

    def load_custom_patterns(self, directory: Path) -> int:
        """Load YAML pattern files from *directory*. Returns count loaded."""
        if not directory.is_dir():
            return 0
        count = 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_patterns(path)
        logger.info("Loaded %d custom secret pattern(s) from %s", count, directory)
        return count

    def _load_yaml_patterns(self, path: Path) -> int:
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to parse {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            if not isinstance(entry, dict) or "id" not in entry or "pattern" not in entry:
                raise ConfigError(f"{path}: each pattern needs 'id' and 'pattern'")
            pattern = SecretPattern(
                id=str(entry["id"]),
                pattern=str(entry["pattern"]),
                category=entry.get("category", "custom"),
                ignore_case=bool(entry.get("ignore_case", False)),
                description=entry.get("description", ""),
            )
            try:
                _ = pattern.compiled_pattern
            except re.error as exc:
                raise ConfigError(f"{path}: invalid regex for {pattern.id}: {exc}") from exc
            self.register(pattern)
            count += 1
        return count


def build_registry(config: DiffBudgetConfig, repo_root: Optional[Path] = None) -> PatternRegistry:
    """Create a fully populated, config-filtered pattern registry."""
    from diffbudget.secrets.builtin import ALL_BUILTIN_PATTERNS

    registry = PatternRegistry()
    # fresh copies so per-registry enable flags don't leak between registries
    registry.register_many(
        [SecretPattern(
            id=p.id,
            pattern=p.pattern,
            category=p.category,
            ignore_case=p.ignore_case,
            description=p.description,
        ) for p in ALL_BUILTIN_PATTERNS]
    )

    if repo_root is not None:
        registry.load_custom_patterns(repo_root / config.secrets.patterns_dir)

    registry.apply_config(config)

    # Force-compile patterns now (not inside the hot loop)
    for pattern in registry.enabled_patterns():
        _ = pattern.compiled_pattern

    return registry
