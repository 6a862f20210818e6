"""Tiered diff processing and overflow summarisation."""

from diffbudget.pipeline.mapreduce import (
    MAX_PARALLEL_CALLS,
    MapReduceResult,
    MapReduceSummarizer,
    group_into_chunks,
)
from diffbudget.pipeline.processor import DiffProcessor, DiffProcessResult, DiffTier

__all__ = [
    "DiffProcessResult",
    "DiffProcessor",
    "DiffTier",
    "MAX_PARALLEL_CALLS",
    "MapReduceResult",
    "MapReduceSummarizer",
    "group_into_chunks",
]
