"""Tiered large-diff processing.

Tier 1 passes a diff that fits straight through. Tier 2 parses the diff
per file, drops lock files and packs the rest by priority under the budget.
Tier 3 additionally summarises whatever tier 2 could not fit, when a
summariser is available.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple

from diffbudget.config.schema import DiffBudgetConfig
from diffbudget.diff.assembler import assemble, build_summary_header
from diffbudget.diff.models import ParsedFileDiff
from diffbudget.diff.parser import parse_diff_into_files
from diffbudget.diff.tokens import SAFETY_MARGIN, estimate_tokens
from diffbudget.diff.truncator import truncate_diff
from diffbudget.pipeline.mapreduce import MapReduceSummarizer, ProgressFn, SummarizeFn

logger = logging.getLogger(__name__)

SUMMARIZED_SECTION_HEADING = "## Summarized Changes (files not included in full diff)"


class DiffTier(IntEnum):
    NORMAL = 1
    SMART_PRIORITIZED = 2
    MAP_REDUCE = 3


@dataclass(frozen=True)
class DiffProcessResult:
    processed_diff: str
    tier: DiffTier
    total_files: int = 0
    included_files: int = 0
    excluded_files: int = 0
    files: Tuple[ParsedFileDiff, ...] = field(default=(), repr=False)
    overflow_files: Tuple[ParsedFileDiff, ...] = field(default=(), repr=False)
    is_truncated: bool = False


class DiffProcessor:
    """Turn a raw diff of any size into prompt content within a token budget."""

    def __init__(
        self,
        config: Optional[DiffBudgetConfig] = None,
        summarize: Optional[SummarizeFn] = None,
        language: str = "english",
        progress: Optional[ProgressFn] = None,
    ) -> None:
        self.config = config or DiffBudgetConfig()
        self._summarize = summarize
        self.language = language
        self._progress = progress

    def process(self, raw_diff: str, token_budget: Optional[int] = None) -> DiffProcessResult:
        if token_budget is None:
            token_budget = self.config.budget.max_input_tokens
        safe_budget = math.floor(token_budget * SAFETY_MARGIN)
        raw_tokens = estimate_tokens(raw_diff)

        if raw_tokens <= safe_budget:
            logger.info("Diff processing: tier 1 (%d tokens, budget %d)", raw_tokens, safe_budget)
            return DiffProcessResult(processed_diff=raw_diff, tier=DiffTier.NORMAL)

        files = parse_diff_into_files(raw_diff)
        if not files:
            logger.warning("Could not parse diff into files, falling back to truncation")
            truncated = truncate_diff(raw_diff, safe_budget)
            return DiffProcessResult(
                processed_diff=truncated.content,
                tier=DiffTier.NORMAL,
                is_truncated=truncated.is_truncated,
            )

        header = build_summary_header(files) if self.config.budget.include_summary_header else ""
        assembled = assemble(files, header, safe_budget)
        logger.info(
            "Diff processing: tier 2 (%d files, %d included, %d summary-only)",
            len(files),
            assembled.included_count,
            assembled.summary_only_count,
        )

        tier = DiffTier.SMART_PRIORITIZED
        content = assembled.content
        if assembled.overflow_files and self._summarize is not None:
            logger.info(
                "Diff processing: tier 3 (%d overflow files)", len(assembled.overflow_files)
            )
            summarizer = MapReduceSummarizer(
                self._summarize,
                progress=self._progress,
                chunk_size=self.config.budget.chunk_size,
            )
            result = summarizer.summarize(assembled.overflow_files, self.language)
            if result.chunks_failed:
                logger.warning(
                    "%d of %d summary chunks failed", result.chunks_failed, result.chunks_processed
                )
            content = f"{content}\n\n{SUMMARIZED_SECTION_HEADING}\n\n{result.summary}"
            tier = DiffTier.MAP_REDUCE

        return DiffProcessResult(
            processed_diff=content,
            tier=tier,
            total_files=len(files),
            included_files=assembled.included_count,
            excluded_files=assembled.summary_only_count,
            files=tuple(files),
            overflow_files=assembled.overflow_files,
        )
