"""AI / LLM provider API keys."""

from diffbudget.secrets.models import SecretPattern

ALL_AI_PATTERNS = [
    SecretPattern(id="anthropic_api_key", pattern=r"\bsk-ant-[A-Za-z0-9-]{10,}\b"),
    SecretPattern(id="openai_project_api_key", pattern=r"\bsk-proj-[A-Za-z0-9]{20,}\b"),
    SecretPattern(id="openai_admin_api_key", pattern=r"\bsk-admin-[A-Za-z0-9]{20,}\b"),
    SecretPattern(id="openai_service_account_key", pattern=r"\bsk-svcacct-[A-Za-z0-9]{20,}\b"),
    SecretPattern(id="openai_org_key", pattern=r"\bsk-or-[A-Za-z0-9]{20,}\b"),
    SecretPattern(
        id="legacy_openai_api_key",
        pattern=r"\bsk-[A-Za-z0-9]{20,}T3BlbkFJ[A-Za-z0-9]*\b",
        description="Pre-2024 OpenAI keys embed base64 'OpenAI' (T3BlbkFJ).",
    ),
    SecretPattern(id="huggingface_token", pattern=r"\bhf_[A-Za-z]{34}\b"),
    SecretPattern(id="replicate_token", pattern=r"\br8_[A-Za-z0-9]{40}\b"),
    SecretPattern(id="perplexity_api_key", pattern=r"\bpplx-[a-z0-9]{48}\b"),
    SecretPattern(id="cohere_api_key", pattern=r"\bco-[A-Za-z0-9]{40}\b"),
    SecretPattern(id="groq_api_key", pattern=r"\bgsk_[A-Za-z0-9]{48}\b"),
    SecretPattern(id="fireworks_api_key", pattern=r"\bfw_[A-Za-z0-9]{32}\b"),
    SecretPattern(id="pinecone_api_key", pattern=r"\bpcsk_[A-Za-z0-9]{40}\b"),
    SecretPattern(id="xai_api_key", pattern=r"\bxai-[A-Za-z0-9]{40}\b"),
    SecretPattern(id="mistral_api_key", pattern=r"\bmist-[A-Za-z0-9]{32}\b"),
    SecretPattern(id="deepseek_api_key", pattern=r"\bsk-ds-[A-Za-z0-9]{20,}\b"),
]
