"""Tests for Conventional Commits scope hints."""

from diffbudget.message.scope import (
    build_format_instruction,
    conventional_commits_format,
    generate_scope_hint,
    traditional_format,
)


class TestScopeHint:
    def test_skips_generic_dirs(self):
        assert generate_scope_hint(["src/services/auth.ts", "src/services/api.ts"]) == "services"

    def test_most_common_wins(self):
        paths = ["lib/ui/button.tsx", "api/routes.py", "api/models.py"]
        assert generate_scope_hint(paths) == "api"

    def test_tie_goes_to_first_seen(self):
        assert generate_scope_hint(["docs/a.md", "cli/main.py"]) == "docs"

    def test_root_files_give_no_scope(self):
        assert generate_scope_hint(["README.md", "Makefile"]) == ""

    def test_dotted_dirs_skipped(self):
        assert generate_scope_hint([".github/workflows/ci.yml"]) == "workflows"

    def test_generic_match_is_case_insensitive(self):
        assert generate_scope_hint(["SRC/Parser/lexer.c"]) == "Parser"

    def test_empty(self):
        assert generate_scope_hint([]) == ""


class TestFormats:
    def test_conventional_with_scope(self):
        text = conventional_commits_format("auth")
        assert text.startswith("<type>(<scope>): <subject>")
        assert 'consider using "auth" as the scope' in text

    def test_conventional_without_scope(self):
        assert "consider using" not in conventional_commits_format("")

    def test_traditional(self):
        assert traditional_format("services").startswith("<prefix>(services): <subject>")
        assert traditional_format().startswith("<prefix>: <subject>")


class TestFormatInstruction:
    def test_conventional_with_hint(self):
        text = build_format_instruction(["src/auth/login.py"])
        assert text.startswith("<type>(<scope>): <subject>")
        assert 'consider using "auth" as the scope' in text

    def test_traditional_with_hint(self):
        text = build_format_instruction(["src/auth/login.py"], conventional=False)
        assert text.startswith("<prefix>(auth): <subject>")

    def test_hint_disabled(self):
        text = build_format_instruction(["src/auth/login.py"], conventional=False, scope_hint=False)
        assert text.startswith("<prefix>: <subject>")

    def test_long_hint_dropped(self):
        text = build_format_instruction(["authentication/login.py"], max_scope_length=10)
        assert "consider using" not in text

    def test_hint_within_limit_kept(self):
        text = build_format_instruction(["auth/login.py"], max_scope_length=4)
        assert 'consider using "auth"' in text
