"""Reporters for processed diffs."""
