"""Load and merge configuration from .diffbudget.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from diffbudget.config.schema import (
    OUTPUT_FORMATS,
    BudgetConfig,
    DiffBudgetConfig,
    OutputConfig,
    PromptConfig,
    SecretsConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".diffbudget.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _positive_int(val: str) -> Optional[int]:
    try:
        n = int(val)
    except ValueError:
        return None
    return n if n > 0 else None


def _merge_env_overrides(cfg: DiffBudgetConfig) -> None:
    """Apply DIFFBUDGET_* environment variable overrides."""
    if val := os.environ.get("DIFFBUDGET_MAX_INPUT_TOKENS"):
        if (n := _positive_int(val)) is not None:
            cfg.budget.max_input_tokens = n
        else:
            logger.warning("Ignoring invalid DIFFBUDGET_MAX_INPUT_TOKENS=%r", val)
    if val := os.environ.get("DIFFBUDGET_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("DIFFBUDGET_DISABLE_PATTERNS"):
        cfg.secrets.disable.extend(p.strip() for p in val.split(",") if p.strip())
    if val := os.environ.get("DIFFBUDGET_MAX_SECRET_MATCHES"):
        try:
            cfg.secrets.max_matches = int(val)
        except ValueError:
            logger.warning("Ignoring invalid DIFFBUDGET_MAX_SECRET_MATCHES=%r", val)
    if val := os.environ.get("DIFFBUDGET_LANGUAGE"):
        cfg.prompt.language = val.strip().lower()


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> DiffBudgetConfig:
    """Load, validate, and return a DiffBudgetConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = DiffBudgetConfig()
    else:
        logger.debug("Loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = DiffBudgetConfig(
            version=raw.get("version", "1.0"),
            budget=_build_section(raw, BudgetConfig, "budget"),
            secrets=_build_section(raw, SecretsConfig, "secrets"),
            output=_build_section(raw, OutputConfig, "output"),
            prompt=_build_section(raw, PromptConfig, "prompt"),
        )

    _merge_env_overrides(cfg)
    return cfg
