"""Tests for edge-case detection and prompt selection."""

import pytest

from diffbudget.edge_cases import (
    EdgeCasePromptOptions,
    EdgeCaseType,
    create_edge_case_prompt,
    describe_edge_case,
    detect_edge_case,
    select_prompt,
)
from diffbudget.git.models import FileCategories, RenamedFile


class TestDetection:
    def test_binary(self, sample_diff_binary):
        assert detect_edge_case(sample_diff_binary) == EdgeCaseType.BINARY_FILES

    def test_whitespace_only(self, sample_diff_whitespace):
        assert detect_edge_case(sample_diff_whitespace) == EdgeCaseType.WHITESPACE_ONLY

    def test_whitespace_concatenation_semantics(self):
        # content moved across line boundaries still counts as whitespace-only
        diff = "-foo bar\n-baz\n+foo\n+bar baz\n"
        assert detect_edge_case(diff) == EdgeCaseType.WHITESPACE_ONLY

    def test_real_change_is_not_whitespace(self, sample_diff_clean):
        assert detect_edge_case(sample_diff_clean) is None

    def test_blank_line_changes_not_whitespace_only(self):
        assert detect_edge_case("+\n-   \n") is None

    def test_empty_diff(self):
        assert detect_edge_case("") is None

    def test_binary_takes_precedence(self, sample_diff_binary, sample_diff_whitespace):
        assert detect_edge_case(sample_diff_whitespace + sample_diff_binary) == EdgeCaseType.BINARY_FILES

    def test_deletions_only(self):
        cats = FileCategories(deleted=("a.py", "b.py"))
        assert detect_edge_case("-x\n", cats) == EdgeCaseType.DELETIONS_ONLY

    def test_renames_only(self):
        cats = FileCategories(renamed=(RenamedFile("a", "b"),))
        assert detect_edge_case("", cats) == EdgeCaseType.RENAMES_ONLY

    def test_mixed(self):
        cats = FileCategories(added=("a",), deleted=("b",))
        assert detect_edge_case("+a\n", cats) == EdgeCaseType.MIXED_OPERATIONS

    def test_single_category_is_normal(self):
        cats = FileCategories(modified=("a",))
        assert detect_edge_case("+new\n-old\n", cats) is None

    def test_deterministic(self, sample_diff_whitespace):
        cats = FileCategories(modified=("app.js",))
        assert detect_edge_case(sample_diff_whitespace, cats) == detect_edge_case(
            sample_diff_whitespace, cats
        )

    def test_string_values(self):
        assert EdgeCaseType.WHITESPACE_ONLY.value == "whitespace-only"
        assert EdgeCaseType.MIXED_OPERATIONS == "mixed-operations"


class TestPrompts:
    def test_language_in_every_template(self):
        cats = FileCategories(added=("a",), deleted=("b",))
        opts = EdgeCasePromptOptions.from_categories("+x\n", cats, language="japanese")
        for edge_case in [*EdgeCaseType, None]:
            assert "japanese" in create_edge_case_prompt(edge_case, opts)

    def test_whitespace_diff_capped(self):
        diff = "+" + "a" * 5000
        prompt = create_edge_case_prompt(
            EdgeCaseType.WHITESPACE_ONLY, EdgeCasePromptOptions(diff=diff)
        )
        assert "a" * 999 in prompt
        assert "a" * 1000 not in prompt

    def test_binary_lists_files(self):
        prompt = create_edge_case_prompt(
            EdgeCaseType.BINARY_FILES,
            EdgeCasePromptOptions(diff="", binary_files=["logo.png", "font.woff"]),
        )
        assert "Binary files changed:\n- logo.png\n- font.woff" in prompt

    def test_binary_without_files(self):
        prompt = create_edge_case_prompt(EdgeCaseType.BINARY_FILES, EdgeCasePromptOptions(diff=""))
        assert "Binary files have been modified." in prompt

    def test_deletions_lists_files(self):
        prompt = create_edge_case_prompt(
            EdgeCaseType.DELETIONS_ONLY,
            EdgeCasePromptOptions(diff="", deleted_files=["old.py"]),
        )
        assert "Files deleted:\n- old.py" in prompt

    def test_renames_show_pairs(self):
        prompt = create_edge_case_prompt(
            EdgeCaseType.RENAMES_ONLY,
            EdgeCasePromptOptions(diff="", renamed_files=[RenamedFile("a.py", "b.py")]),
        )
        assert "- a.py -> b.py" in prompt

    def test_mixed_summary_truncates_names(self):
        cats = FileCategories(added=("a", "b", "c", "d"), modified=("m",), binary=("x.png",))
        prompt = create_edge_case_prompt(
            EdgeCaseType.MIXED_OPERATIONS,
            EdgeCasePromptOptions.from_categories("", cats),
        )
        assert "- Added 4 file(s): a, b, c..." in prompt
        assert "- Modified 1 file(s): m\n" in prompt
        assert "- Binary 1 file(s)" in prompt

    def test_mixed_without_categories_uses_default(self):
        prompt = create_edge_case_prompt(
            EdgeCaseType.MIXED_OPERATIONS, EdgeCasePromptOptions(diff="ignored")
        )
        assert "Git diff:\nmixed changes\n" in prompt

    def test_default_embeds_diff(self, sample_diff_clean):
        prompt = create_edge_case_prompt(None, EdgeCasePromptOptions(diff=sample_diff_clean))
        assert sample_diff_clean in prompt


class TestSelectPrompt:
    def test_select(self, sample_diff_binary):
        cats = FileCategories(binary=("image.png",))
        edge_case, prompt = select_prompt(sample_diff_binary, cats, "english")
        assert edge_case == EdgeCaseType.BINARY_FILES
        assert "- image.png" in prompt

    @pytest.mark.parametrize("edge_case", [*EdgeCaseType, None])
    def test_descriptions(self, edge_case):
        assert describe_edge_case(edge_case)

    def test_standard_description(self):
        assert describe_edge_case(None) == "Standard changes"

    def test_format_instruction_appended(self, sample_diff_clean):
        _, prompt = select_prompt(sample_diff_clean, None, "english", format_instruction="<type>: <subject>")
        assert prompt.endswith(
            "The commit message should follow this format without any leading newlines:\n"
            "<type>: <subject>"
        )

    def test_format_instruction_on_edge_case_template(self, sample_diff_binary):
        edge_case, prompt = select_prompt(sample_diff_binary, format_instruction="<prefix>: <subject>")
        assert edge_case == EdgeCaseType.BINARY_FILES
        assert prompt.endswith("<prefix>: <subject>")

    def test_no_format_instruction_by_default(self, sample_diff_clean):
        _, prompt = select_prompt(sample_diff_clean)
        assert "should follow this format" not in prompt
