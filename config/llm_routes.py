from __future__ import annotations

import os


# Central routing for LLM use-cases. Edit here to change per-operation defaults.
# You can also override per-route values via env vars for quick testing.
#
# Keys are use_case identifiers consumed by services/llm_client.py
ROUTES: dict[str, dict] = {
    # Profile summary injected under the headline (OpenAI chat)
    "profile_summary": {
        "provider": os.getenv("LLM_SUMMARY_PROVIDER", "openai"),
        "model": os.getenv("OPENAI_MODEL_SUMMARY"),  # falls back to global OPENAI_MODEL
        "max_tokens": int(os.getenv("SUMMARY_MAX_TOKENS", "300")),
        "temperature": float(os.getenv("SUMMARY_TEMPERATURE", "0.7")),
        # Logical operation name for logging (not a vendor API name)
        "operation": "profile_summary",
    },
}
