"""Tests for output reporters."""

import io
import json

from rich.console import Console

from diffbudget.edge_cases import EdgeCaseType
from diffbudget.output import json_report, terminal
from diffbudget.pipeline import DiffProcessor
from diffbudget.secrets.models import SecretDetectionResult


def _tier2_result(make_diff):
    raw = (
        make_diff("yarn.lock", additions=200)
        + make_diff("src/app.py", additions=3)
        + make_diff("src/huge.py", additions=400)
    )
    return DiffProcessor().process(raw, 300)


def _tier3_result(make_diff):
    raw = make_diff("src/app.py", additions=3) + make_diff("src/huge.py", additions=400)
    return DiffProcessor(summarize=lambda text, lang: "summary").process(raw, 300)


class TestJsonReport:
    def test_structure(self, make_diff):
        data = json_report.to_dict(_tier2_result(make_diff))
        assert data["tier"] == 2
        assert data["total_files"] == 3
        assert data["edge_case"] is None
        assert "secrets" not in data
        assert "prompt" not in data
        statuses = {f["path"]: f["status"] for f in data["files"]}
        assert statuses == {
            "yarn.lock": "excluded",
            "src/app.py": "included",
            "src/huge.py": "summary-only",
        }
        priorities = {f["path"]: f["priority"] for f in data["files"]}
        assert priorities["yarn.lock"] == "exclude"
        assert priorities["src/app.py"] == "high"

    def test_tier3_marks_summarized(self, make_diff):
        data = json_report.to_dict(_tier3_result(make_diff))
        assert data["tier"] == 3
        statuses = {f["path"]: f["status"] for f in data["files"]}
        assert statuses["src/huge.py"] == "summarized"

    def test_optional_sections(self, make_diff):
        secrets = SecretDetectionResult(True, ("aws_access_key_id",))
        data = json_report.to_dict(
            _tier2_result(make_diff),
            secrets=secrets,
            edge_case=EdgeCaseType.BINARY_FILES,
            prompt="Write a commit message",
        )
        assert data["secrets"] == {
            "has_potential_secrets": True,
            "matched_pattern_ids": ["aws_access_key_id"],
        }
        assert data["edge_case"] == "binary-files"
        assert data["prompt"] == "Write a commit message"

    def test_render_is_valid_json(self, sample_diff_clean):
        result = DiffProcessor().process(sample_diff_clean, 10_000)
        data = json.loads(json_report.render(result))
        assert data["tier"] == 1
        assert data["files"] == []
        assert data["processed_diff"] == sample_diff_clean


class TestTerminal:
    def _render(self, result, **kwargs) -> str:
        buf = io.StringIO()
        console = Console(file=buf, width=160, force_terminal=False)
        terminal.render(result, console=console, **kwargs)
        return buf.getvalue()

    def test_table_lists_files(self, make_diff):
        out = self._render(_tier2_result(make_diff))
        assert "Tier 2: prioritized" in out
        assert "src/app.py" in out
        assert "summary-only" in out
        assert "Files:" in out

    def test_hide_files(self, make_diff):
        out = self._render(_tier2_result(make_diff), show_files=False)
        assert "src/app.py" not in out

    def test_secrets_warning(self, sample_diff_clean):
        result = DiffProcessor().process(sample_diff_clean, 10_000)
        out = self._render(result, secrets=SecretDetectionResult(True, ("jwt_token",)))
        assert "Possible credentials" in out
        assert "jwt_token" in out

    def test_edge_case_line(self, sample_diff_binary):
        result = DiffProcessor().process(sample_diff_binary, 10_000)
        out = self._render(result, edge_case=EdgeCaseType.BINARY_FILES)
        assert "binary-files" in out

    def test_statuses_follow_file_order(self, make_diff):
        result = _tier2_result(make_diff)
        assert terminal.file_statuses(result) == ["excluded", "included", "summary-only"]
