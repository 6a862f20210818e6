"""Starter .diffbudget.toml template."""

DEFAULT_TOML = """\
# diffbudget configuration
version = "1.0"

[budget]
max_input_tokens = 200000     # prompt budget in estimated tokens (4 chars each)
chunk_size = 80000            # map-reduce chunk size for overflow summaries
include_summary_header = true

[secrets]
enabled = true
max_matches = 5
# disable = ["jwt_token", "database_url_reference"]
patterns_dir = ".diffbudget-patterns"

[output]
format = "terminal"           # terminal | json
show_files = true

[prompt]
language = "english"
conventional_commits = true
scope_hint = true
# max_scope_length = 20      # drop scope hints longer than this
"""
