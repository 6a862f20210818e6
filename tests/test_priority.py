"""Tests for file priority classification."""

import pytest

from diffbudget.diff.priority import (
    LOCK_FILE_NAMES,
    Priority,
    classify,
    is_lock_file,
    is_low_priority_file,
    priority_label,
)


class TestLockFiles:
    @pytest.mark.parametrize("name", LOCK_FILE_NAMES)
    def test_every_lock_name_excluded(self, name):
        assert classify(name) == Priority.EXCLUDE

    def test_nested_lock_file(self):
        assert classify("packages/web/yarn.lock") == Priority.EXCLUDE

    def test_lock_beats_low_priority_dir(self):
        assert classify("dist/package-lock.json") == Priority.EXCLUDE

    def test_windows_separators(self):
        assert is_lock_file("frontend\\package-lock.json")

    def test_similar_name_is_not_lock(self):
        assert classify("my-package-lock.json.bak") == Priority.HIGH


class TestLowPriority:
    @pytest.mark.parametrize(
        "path",
        [
            "static/app.min.js",
            "static/app.min.css",
            "types/index.d.ts",
            "tests/__snapshots__/view.snap",
            "bundle.js.map",
            "api/client.generated.ts",
            "dist/index.js",
            "packages/core/build/out.js",
            "out/main.js",
            "coverage/lcov.info",
        ],
    )
    def test_generated_output(self, path):
        assert classify(path) == Priority.LOW
        assert is_low_priority_file(path)

    def test_directory_name_must_be_whole_segment(self):
        assert classify("redistribute/main.py") == Priority.HIGH
        assert classify("rebuild/main.py") == Priority.HIGH


class TestHighPriority:
    @pytest.mark.parametrize("path", ["src/app.ts", "README.md", "cli.py", "Makefile"])
    def test_source(self, path):
        assert classify(path) == Priority.HIGH


class TestLabels:
    def test_labels(self):
        assert priority_label(Priority.EXCLUDE) == " [LOCK]"
        assert priority_label(Priority.LOW) == " [generated]"
        assert priority_label(Priority.HIGH) == ""

    def test_ordering(self):
        assert Priority.HIGH > Priority.LOW > Priority.EXCLUDE
