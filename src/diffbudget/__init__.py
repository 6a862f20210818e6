"""diffbudget — large-diff processing for LLM-generated commit messages and PRs."""

__version__ = "0.1.0"
