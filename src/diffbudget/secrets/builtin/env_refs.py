"""Context-based indicators: well-known secret variable names being assigned.

These don't look at the value at all; a ``NAME =`` or ``NAME:`` is enough.
"""

from diffbudget.secrets.models import SecretPattern


def _ref(id: str, pattern: str) -> SecretPattern:
    return SecretPattern(id=id, pattern=pattern, category="env_reference", ignore_case=True)


ALL_ENV_REFERENCE_PATTERNS = [
    _ref(
        "cloudflare_env_secret_reference",
        r"(?:CLOUDFLARE|CF)_(?:API_KEY|API_TOKEN|DNS_API_TOKEN)\s*[=:]",
    ),
    _ref("vercel_token_reference", r"VERCEL_TOKEN\s*[=:]"),
    _ref("fastly_token_reference", r"FASTLY_API_TOKEN\s*[=:]"),
    _ref("datadog_key_reference", r"DD_(?:API|APP)_KEY\s*[=:]"),
    _ref("sentry_dsn_reference", r"SENTRY_DSN\s*[=:].*https://"),
    _ref("auth0_client_secret_reference", r"AUTH0_CLIENT_SECRET\s*[=:]"),
    _ref("clerk_secret_key_reference", r"CLERK_SECRET_KEY\s*[=:]"),
    _ref("okta_secret_reference", r"OKTA_.*(?:TOKEN|SECRET)\s*[=:]"),
    _ref("line_secret_reference", r"LINE_CHANNEL_(?:SECRET|ACCESS_TOKEN)\s*[=:]"),
    _ref("firebase_secret_reference", r"FIREBASE_.*(?:KEY|TOKEN|SECRET)\s*[=:]"),
    _ref("shopify_secret_reference", r"SHOPIFY_.*(?:TOKEN|KEY|SECRET)\s*[=:]"),
    _ref("postmark_token_reference", r"POSTMARK_(?:SERVER|ACCOUNT)_TOKEN\s*[=:]"),
    _ref("vonage_secret_reference", r"VONAGE_API_SECRET\s*[=:]"),
    _ref("twilio_auth_token_reference", r"TWILIO_AUTH_TOKEN\s*[=:]"),
    _ref("pagerduty_token_reference", r"PAGERDUTY_(?:API_KEY|TOKEN)\s*[=:]"),
    _ref("upstash_token_reference", r"UPSTASH_REDIS_REST_TOKEN\s*[=:]"),
    _ref("algolia_key_reference", r"ALGOLIA_(?:ADMIN|SEARCH)_(?:API_)?KEY\s*[=:]"),
    _ref("azure_client_secret_reference", r"AZURE_CLIENT_SECRET\s*[=:]"),
    _ref("paypay_secret_reference", r"PAYPAY_.*(?:SECRET|KEY)\s*[=:]"),
    _ref(
        "public_env_secret_reference",
        r"(?:VITE|NEXT_PUBLIC|REACT_APP|NUXT_PUBLIC|EXPO_PUBLIC|GATSBY)_[A-Z0-9_]*"
        r"(?:KEY|SECRET|TOKEN|PASSWORD)\s*=",
    ),
    _ref("gcp_service_account_reference", r"GCP_SERVICE_ACCOUNT\s*[=:]"),
    _ref("service_account_json_type", r'"type"\s*:\s*"service_account"'),
    # modern framework / SDK variables
    _ref("nextauth_secret_reference", r"NEXTAUTH_SECRET\s*[=:]"),
    _ref(
        "database_url_reference",
        r"(?:DATABASE_URL|PRISMA_DATABASE_URL|TURSO_CONNECTION_URL)\s*[=:]",
    ),
    _ref("langchain_api_key_reference", r"LANGCHAIN_API_KEY\s*[=:]"),
    _ref("supabase_key_reference", r"SUPABASE_(?:SERVICE_ROLE_KEY|ANON_KEY)\s*[=:]"),
    _ref("openai_api_key_reference", r"OPENAI_API_KEY\s*[=:]"),
    _ref("anthropic_api_key_reference", r"ANTHROPIC_API_KEY\s*[=:]"),
]
