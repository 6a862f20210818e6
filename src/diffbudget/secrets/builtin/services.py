"""Database, monitoring and SaaS platform tokens."""

from diffbudget.secrets.models import SecretPattern

ALL_DATABASE_PATTERNS = [
    SecretPattern(id="supabase_service_key", pattern=r"\bsbp_[a-f0-9]{40}\b"),
    SecretPattern(id="planetscale_token", pattern=r"\bpscale_tkn_[A-Za-z0-9_-]{43}\b"),
    SecretPattern(id="planetscale_password", pattern=r"\bpscale_pw_[A-Za-z0-9_-]{43}\b"),
    SecretPattern(id="planetscale_oauth", pattern=r"\bpscale_oauth_[A-Za-z0-9_-]{43}\b"),
    SecretPattern(id="databricks_token", pattern=r"\bdbi_[a-f0-9]{40}\b"),
]

ALL_MONITORING_PATTERNS = [
    SecretPattern(id="newrelic_api_key", pattern=r"\bNRAK-[A-Z0-9]{27}\b"),
    SecretPattern(id="sentry_auth_token", pattern=r"\bsntrys_[A-Za-z0-9]{64}\b"),
    SecretPattern(id="grafana_service_account", pattern=r"\bglsa_[A-Za-z0-9]{32}\b"),
    SecretPattern(id="grafana_cloud_token", pattern=r"\bglc_[A-Za-z0-9]{44}\b"),
    SecretPattern(id="linode_api_token", pattern=r"\blin_api_[A-Za-z0-9]{40}\b"),
    SecretPattern(id="atlassian_api_token", pattern=r"\bxaat-[a-f0-9]{8}-[A-Za-z0-9-]+\b"),
]

ALL_SAAS_PATTERNS = [
    SecretPattern(id="notion_secret", pattern=r"\bsecret_[A-Za-z0-9]{43}\b"),
    SecretPattern(id="notion_token", pattern=r"\bntn_[A-Za-z0-9]{50}\b"),
    SecretPattern(id="postman_api_key", pattern=r"\bPMAK-[a-f0-9]{24}-[A-Za-z0-9]+\b"),
    SecretPattern(id="facebook_access_token", pattern=r"\bEAAx[0-9A-Za-z]{20,}\b"),
    SecretPattern(id="cloudflare_api_token", pattern=r"\bCFPAT-[A-Za-z0-9_-]{43}\b"),
    SecretPattern(id="shopify_admin_token", pattern=r"\bshpat_[a-fA-F0-9]{32}\b"),
    SecretPattern(id="shopify_private_app_password", pattern=r"\bshppa_[a-fA-F0-9]{32}\b"),
    SecretPattern(id="vault_token", pattern=r"\bvlt_[A-Za-z0-9]{40}\b"),
]
