from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None
    openai_model: str | None
    openai_base_url: str | None

    log_level: str
    run_env: str

    # AI gating
    ai_enabled: bool

    # Pipeline timing
    warmup_seconds: float
    element_timeout_seconds: float
    frame_interval_seconds: float

    # Browser
    browser_headless: bool
    browser_user_data_dir: str | None

    # Prompt
    summary_language: str = "french"

    # Logging/tracing
    llm_trace: bool = False
    llm_log_path: str = "logs/llm_calls.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    ai_enabled = _as_bool(os.getenv("AI_ENABLED"))
    openai_api_key = os.getenv("OPENAI_API_KEY")

    if ai_enabled and not openai_api_key:
        raise RuntimeError("OPENAI_API_KEY required when AI_ENABLED=true")
    return Settings(
        openai_api_key=openai_api_key,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        ai_enabled=ai_enabled,
        warmup_seconds=float(os.getenv("WARMUP_SECONDS", "5")),
        element_timeout_seconds=float(os.getenv("ELEMENT_TIMEOUT", "10")),
        frame_interval_seconds=float(os.getenv("FRAME_INTERVAL", str(1 / 60))),
        browser_headless=_as_bool(os.getenv("BROWSER_HEADLESS"), default=False),
        browser_user_data_dir=os.getenv("BROWSER_USER_DATA_DIR") or None,
        summary_language=os.getenv("SUMMARY_LANGUAGE", "french"),
        llm_trace=_as_bool(os.getenv("LLM_TRACE")),
        llm_log_path=os.getenv("LLM_LOG_PATH", "logs/llm_calls.jsonl"),
    )
