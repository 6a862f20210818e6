"""Cloud provider credentials — AWS, Google, Azure, OCI."""

from diffbudget.secrets.models import SecretPattern

ALL_CLOUD_PATTERNS = [
    SecretPattern(id="aws_access_key_id", pattern=r"\bAKIA[0-9A-Z]{16}\b", category="cloud"),
    SecretPattern(id="aws_session_key_id", pattern=r"\bASIA[0-9A-Z]{16}\b", category="cloud"),
    SecretPattern(
        id="aws_secret_access_key_reference",
        pattern=r"AWS_SECRET_ACCESS_KEY\s*[=:]",
        category="env_reference",
        ignore_case=True,
    ),
    SecretPattern(id="google_api_key", pattern=r"\bAIza[0-9A-Za-z_-]{35}\b", category="cloud"),
    SecretPattern(id="google_oauth_token", pattern=r"\bya29\.[0-9A-Za-z_-]+\b", category="cloud"),
    SecretPattern(
        id="google_oauth_client_secret",
        pattern=r"\bGOCSPX-[A-Za-z0-9_-]{28}\b",
        category="cloud",
    ),
    SecretPattern(
        id="azure_storage_account_key",
        pattern=r"AccountKey=[A-Za-z0-9+/=]{80,}",
        category="cloud",
    ),
    SecretPattern(
        id="azure_storage_connection_string",
        pattern=r"DefaultEndpointsProtocol=https;AccountName=",
        category="connection",
    ),
    SecretPattern(
        id="oci_identifier",
        pattern=r"\bocid1\.[a-z]+\.oc1\.\.[a-z0-9]{30,}\b",
        category="cloud",
    ),
]
