"""JSON reporter for scripts and editor integrations."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from diffbudget.diff.tokens import estimate_tokens
from diffbudget.edge_cases.detector import EdgeCaseType
from diffbudget.output.terminal import file_statuses
from diffbudget.pipeline.processor import DiffProcessResult
from diffbudget.secrets.models import SecretDetectionResult


def to_dict(
    result: DiffProcessResult,
    *,
    secrets: Optional[SecretDetectionResult] = None,
    edge_case: Optional[EdgeCaseType] = None,
    prompt: Optional[str] = None,
) -> Dict[str, Any]:
    """Convert a DiffProcessResult to a JSON-serialisable dict."""
    files_list: List[Dict[str, Any]] = []
    for f, status in zip(result.files, file_statuses(result)):
        files_list.append({
            "path": f.file_path,
            "priority": f.priority.name.lower(),
            "additions": f.additions,
            "deletions": f.deletions,
            "tokens": f.token_count,
            "status": status,
        })

    report: Dict[str, Any] = {
        "version": "1.0",
        "tier": int(result.tier),
        "total_files": result.total_files,
        "included_files": result.included_files,
        "excluded_files": result.excluded_files,
        "is_truncated": result.is_truncated,
        "payload_tokens": estimate_tokens(result.processed_diff),
        "files": files_list,
        "edge_case": edge_case.value if edge_case is not None else None,
        "processed_diff": result.processed_diff,
    }
    if secrets is not None:
        report["secrets"] = {
            "has_potential_secrets": secrets.has_potential_secrets,
            "matched_pattern_ids": list(secrets.matched_pattern_ids),
        }
    if prompt is not None:
        report["prompt"] = prompt
    return report


def render(
    result: DiffProcessResult,
    *,
    secrets: Optional[SecretDetectionResult] = None,
    edge_case: Optional[EdgeCaseType] = None,
    prompt: Optional[str] = None,
) -> str:
    """Return formatted JSON string."""
    return json.dumps(
        to_dict(result, secrets=secrets, edge_case=edge_case, prompt=prompt),
        indent=2,
    )
