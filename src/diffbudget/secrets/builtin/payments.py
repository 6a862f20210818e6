"""Payment provider keys — Stripe, Square, PayPal."""

from diffbudget.secrets.models import SecretPattern

ALL_PAYMENT_PATTERNS = [
    SecretPattern(id="stripe_live_secret_key", pattern=r"\bsk_live_[0-9A-Za-z]{24}\b"),
    SecretPattern(id="stripe_test_secret_key", pattern=r"\bsk_test_[0-9A-Za-z]{24}\b"),
    SecretPattern(id="stripe_live_restricted_key", pattern=r"\brk_live_[0-9A-Za-z]{24}\b"),
    SecretPattern(id="stripe_webhook_secret", pattern=r"\bwhsec_[0-9A-Za-z]{32}\b"),
    SecretPattern(
        id="stripe_live_publishable_key",
        pattern=r"\bpk_live_[0-9A-Za-z]{24}\b",
        description="Semi-public, but still flagged so the user decides.",
    ),
    SecretPattern(id="square_access_token", pattern=r"\bsq0atp-[0-9A-Za-z_-]{22}\b"),
    SecretPattern(id="square_secret", pattern=r"\bsq0csp-[0-9A-Za-z_-]{43}\b"),
    SecretPattern(
        id="paypal_access_token",
        pattern=r"\baccess-(?:sandbox|development|production)-[a-f0-9-]{36}\b",
    ),
]
