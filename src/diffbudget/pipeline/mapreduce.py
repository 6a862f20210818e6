"""Summarise overflow files in parallel chunks (tier 3)."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from diffbudget.diff.models import ParsedFileDiff
from diffbudget.diff.tokens import MAP_REDUCE_CHUNK_SIZE, estimate_tokens

logger = logging.getLogger(__name__)

MAX_PARALLEL_CALLS = 3

# (chunk text, language) -> summary text
SummarizeFn = Callable[[str, str], str]
ProgressFn = Callable[[str], None]


@dataclass(frozen=True)
class MapReduceResult:
    summary: str
    chunks_processed: int
    chunks_failed: int


def group_into_chunks(
    files: Sequence[ParsedFileDiff],
    chunk_token_limit: int,
) -> List[List[ParsedFileDiff]]:
    """Pack *files* in order into chunks of at most *chunk_token_limit* tokens.

    A file is never split. A file larger than the limit gets a chunk of its own.
    """
    chunks: List[List[ParsedFileDiff]] = []
    current: List[ParsedFileDiff] = []
    current_tokens = 0

    for f in files:
        if f.token_count > chunk_token_limit:
            if current:
                chunks.append(current)
                current, current_tokens = [], 0
            chunks.append([f])
            continue

        if current_tokens + f.token_count > chunk_token_limit:
            if current:
                chunks.append(current)
            current, current_tokens = [f], f.token_count
        else:
            current.append(f)
            current_tokens += f.token_count

    if current:
        chunks.append(current)
    return chunks


class MapReduceSummarizer:
    """Summarise chunks through *summarize*, at most three calls at a time."""

    def __init__(
        self,
        summarize: SummarizeFn,
        progress: Optional[ProgressFn] = None,
        chunk_size: int = MAP_REDUCE_CHUNK_SIZE,
    ) -> None:
        self._summarize = summarize
        self._progress = progress
        self.chunk_size = chunk_size

    def summarize(self, files: Sequence[ParsedFileDiff], language: str) -> MapReduceResult:
        chunks = group_into_chunks(files, self.chunk_size)
        logger.info("Map-reduce: processing %d chunks from %d files", len(chunks), len(files))

        summaries: List[str] = []
        failed = 0

        with ThreadPoolExecutor(max_workers=MAX_PARALLEL_CALLS) as executor:
            for start in range(0, len(chunks), MAX_PARALLEL_CALLS):
                batch = chunks[start : start + MAX_PARALLEL_CALLS]
                futures = []
                for offset, chunk in enumerate(batch):
                    index = start + offset
                    if self._progress is not None:
                        self._progress(f"{index + 1}/{len(chunks)}")
                    futures.append(executor.submit(self._summarize_chunk, chunk, language, index))

                # collected in submission order, not completion order
                for chunk, future in zip(batch, futures):
                    result = future.result()
                    if result:
                        summaries.append(result)
                    else:
                        failed += 1
                        names = ", ".join(f.file_path for f in chunk)
                        summaries.append(f"[Summarization failed for: {names}]")

        return MapReduceResult(
            summary="\n\n".join(summaries),
            chunks_processed=len(chunks),
            chunks_failed=failed,
        )

    def _summarize_chunk(
        self,
        chunk: List[ParsedFileDiff],
        language: str,
        index: int,
    ) -> Optional[str]:
        content = "\n".join(f.content for f in chunk)
        logger.debug(
            "Summarizing chunk %d (%d tokens, %d files)",
            index,
            estimate_tokens(content),
            len(chunk),
        )
        try:
            return self._summarize(content, language)
        except Exception:
            logger.exception("Failed to summarize chunk %d", index)
            return None
