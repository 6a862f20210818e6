"""Shared test fixtures — sample diffs, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


def make_file_diff(path: str, additions: int = 1, deletions: int = 0, line: str = "x = 1") -> str:
    """Build a single-file unified diff section with the given change counts."""
    body = "".join(f"-{line} old {i}\n" for i in range(deletions))
    body += "".join(f"+{line} new {i}\n" for i in range(additions))
    return (
        f"diff --git a/{path} b/{path}\n"
        "index 1234567..abcdef0 100644\n"
        f"--- a/{path}\n"
        f"+++ b/{path}\n"
        f"@@ -1,{deletions} +1,{additions} @@\n"
        f"{body}"
    )


@pytest.fixture
def sample_diff_clean() -> str:
    """A small one-file diff with no secrets."""
    return textwrap.dedent("""\
        diff --git a/hello.py b/hello.py
        new file mode 100644
        index 0000000..e69de29
        --- /dev/null
        +++ b/hello.py
        @@ -0,0 +1,3 @@
        +def greet(name):
        +    return f"Hello, {name}!"
        +
    """)


@pytest.fixture
def sample_diff_source_and_lock() -> str:
    """a.ts (+5/-2) followed by package-lock.json (+500/-300)."""
    return make_file_diff("a.ts", additions=5, deletions=2, line="const a") + make_file_diff(
        "package-lock.json", additions=500, deletions=300, line='"dep": "1.0.0"'
    )


@pytest.fixture
def sample_diff_mixed_priorities() -> str:
    """dist bundle, source file, lock file and a snapshot, in that order."""
    return (
        make_file_diff("dist/bundle.min.js", additions=3)
        + make_file_diff("src/services/auth.py", additions=4, deletions=1)
        + make_file_diff("yarn.lock", additions=10)
        + make_file_diff("tests/__snapshots__/view.snap", additions=2)
    )


@pytest.fixture
def sample_diff_binary() -> str:
    """A diff with a binary file."""
    return textwrap.dedent("""\
        diff --git a/image.png b/image.png
        new file mode 100644
        Binary files /dev/null and b/image.png differ
    """)


@pytest.fixture
def sample_diff_rename() -> str:
    """A diff with a renamed file."""
    return textwrap.dedent("""\
        diff --git a/old_name.py b/new_name.py
        similarity index 97%
        rename from old_name.py
        rename to new_name.py
        index abc1234..def5678 100644
        --- a/old_name.py
        +++ b/new_name.py
        @@ -1,0 +2,1 @@
        +# New line added after rename
    """)


@pytest.fixture
def sample_diff_whitespace() -> str:
    """Trailing whitespace removed from one line."""
    return (
        "diff --git a/app.js b/app.js\n"
        "index 1234567..abcdef0 100644\n"
        "--- a/app.js\n"
        "+++ b/app.js\n"
        "@@ -1 +1 @@\n"
        "-const x = 1;  \n"
        "+const x = 1;\n"
    )


@pytest.fixture
def make_diff():
    """Factory for single-file diff sections."""
    return make_file_diff


@pytest.fixture
def sample_diff_with_openai_key() -> str:
    """A .env diff carrying an OpenAI project key."""
    return textwrap.dedent("""\
        diff --git a/.env b/.env
        new file mode 100644
        index 0000000..abc1234
        --- /dev/null
        +++ b/.env
        @@ -0,0 +1 @@
        +OPENAI_API_KEY=sk-proj-abcdefghijklmnopqrstuvwxyz0123456789
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
