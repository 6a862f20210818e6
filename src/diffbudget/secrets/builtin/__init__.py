"""Built-in secret patterns — aggregate all provider families in scan order."""

from typing import List

from diffbudget.secrets.builtin.ai import ALL_AI_PATTERNS
from diffbudget.secrets.builtin.cloud import ALL_CLOUD_PATTERNS
from diffbudget.secrets.builtin.env_refs import ALL_ENV_REFERENCE_PATTERNS
from diffbudget.secrets.builtin.keys import ALL_CONNECTION_PATTERNS, ALL_KEY_PATTERNS
from diffbudget.secrets.builtin.messaging import ALL_MESSAGING_PATTERNS
from diffbudget.secrets.builtin.payments import ALL_PAYMENT_PATTERNS
from diffbudget.secrets.builtin.services import (
    ALL_DATABASE_PATTERNS,
    ALL_MONITORING_PATTERNS,
    ALL_SAAS_PATTERNS,
)
from diffbudget.secrets.builtin.vcs import (
    ALL_CI_PATTERNS,
    ALL_HOSTING_PATTERNS,
    ALL_VCS_PATTERNS,
)
from diffbudget.secrets.models import SecretPattern

ALL_BUILTIN_PATTERNS: List[SecretPattern] = [
    *ALL_AI_PATTERNS,
    *ALL_CLOUD_PATTERNS,
    *ALL_VCS_PATTERNS,
    *ALL_CI_PATTERNS,
    *ALL_HOSTING_PATTERNS,
    *ALL_PAYMENT_PATTERNS,
    *ALL_MESSAGING_PATTERNS,
    *ALL_DATABASE_PATTERNS,
    *ALL_MONITORING_PATTERNS,
    *ALL_SAAS_PATTERNS,
    *ALL_KEY_PATTERNS,
    *ALL_CONNECTION_PATTERNS,
    *ALL_ENV_REFERENCE_PATTERNS,
]

__all__ = ["ALL_BUILTIN_PATTERNS"]
