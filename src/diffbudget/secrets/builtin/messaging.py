"""Chat, email and SMS provider tokens."""

from diffbudget.secrets.models import SecretPattern

ALL_MESSAGING_PATTERNS = [
    SecretPattern(id="slack_bot_token", pattern=r"\bxoxb-[0-9A-Za-z-]{10,}\b"),
    SecretPattern(id="slack_user_token", pattern=r"\bxoxp-[0-9A-Za-z-]{10,}\b"),
    SecretPattern(id="slack_workspace_token", pattern=r"\bxoxs-[0-9A-Za-z-]{10,}\b"),
    SecretPattern(id="slack_app_token", pattern=r"\bxapp-[0-9A-Za-z-]{10,}\b"),
    SecretPattern(
        id="slack_webhook_url",
        pattern=r"hooks\.slack\.com/services/T[A-Za-z0-9]+/B[A-Za-z0-9]+/[A-Za-z0-9]+",
    ),
    SecretPattern(
        id="sendgrid_api_key",
        pattern=r"\bSG\.[A-Za-z0-9_-]{22}\.[A-Za-z0-9_-]{43}\b",
    ),
    SecretPattern(id="resend_api_key", pattern=r"\bre_[A-Za-z0-9]{30}\b"),
    SecretPattern(id="sendinblue_api_key", pattern=r"\bxkeysib-[a-f0-9]{64}\b"),
    SecretPattern(id="mailchimp_api_key", pattern=r"\b[a-f0-9]{32}-us[0-9]{1,2}\b"),
    SecretPattern(id="sendinblue_legacy_key", pattern=r"\bSK[0-9a-fA-F]{32}\b"),
    SecretPattern(id="twilio_account_sid", pattern=r"\bAC[0-9a-fA-F]{32}\b"),
]
