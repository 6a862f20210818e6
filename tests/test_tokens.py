"""Tests for token estimation and budget allocations."""

import math

import pytest

from diffbudget.diff.tokens import (
    CONTEXT_LIMIT,
    MAX_INPUT_TOKENS,
    OUTPUT_TOKENS,
    REASONING_BUFFER,
    OperationKind,
    estimate_tokens,
    get_max_input_tokens,
    output_tokens_for,
    truncate_input,
    validate_allocation,
)


class TestEstimateTokens:
    def test_empty_is_zero(self):
        assert estimate_tokens("") == 0

    @pytest.mark.parametrize("text", ["a", "abcd", "abcde", "x" * 1001, "日本語"])
    def test_ceil_of_quarter_length(self, text):
        assert estimate_tokens(text) == math.ceil(len(text) / 4)

    def test_never_negative(self):
        assert estimate_tokens(" ") >= 0


class TestAllocations:
    def test_output_tokens_per_operation(self):
        assert output_tokens_for(OperationKind.COMMIT_MESSAGE) == 4000
        assert output_tokens_for("pr_title") == 500
        assert output_tokens_for(OperationKind.PR_BODY) == 8000
        assert output_tokens_for(OperationKind.ISSUE) == 12000
        assert OUTPUT_TOKENS.commit_message == 4000

    def test_unknown_operation_raises(self):
        with pytest.raises(ValueError):
            output_tokens_for("haiku")

    def test_max_input_capped_at_input_limit(self):
        assert get_max_input_tokens(4000) == MAX_INPUT_TOKENS

    def test_max_input_shrinks_for_huge_output(self):
        output = CONTEXT_LIMIT - REASONING_BUFFER - 1000
        assert get_max_input_tokens(output) == 1000

    def test_validate_allocation(self):
        assert validate_allocation(MAX_INPUT_TOKENS, 12000) is True
        assert validate_allocation(CONTEXT_LIMIT, 1) is False


class TestTruncateInput:
    def test_short_text_untouched(self):
        assert truncate_input("hello", 10) == "hello"

    def test_hard_cut(self):
        assert truncate_input("a" * 100, 5) == "a" * 20
