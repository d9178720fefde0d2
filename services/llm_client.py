from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

import httpx
from openai import APIError, APIStatusError, AsyncOpenAI

from config.llm_routes import ROUTES
from config.settings import get_settings
from services.errors import RemoteServiceError
from utils.llm_logger import LLMCallRecord, log_call, sha256_text


logger = logging.getLogger(__name__)


def _error_message(exc: APIError) -> str:
    """Pull ``error.message`` out of the service's error payload."""
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict) and nested.get("message"):
            return str(nested["message"])
        if body.get("message"):
            return str(body["message"])
    if isinstance(exc, APIStatusError):
        return "Unknown error"
    return str(exc) or "Unknown error"


class LLMClient:
    """Minimal wrapper to centralize per-use-case routing and logging."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = get_settings()
        self._api_key = api_key or self.settings.openai_api_key
        self._base_url = base_url or self.settings.openai_base_url
        self._http_client = http_client
        self._client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            # No retries: one round trip per summary
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                http_client=self._http_client,
                max_retries=0,
            )
        return self._client

    async def chat(
        self,
        *,
        use_case: str,
        messages: List[Dict[str, str]],
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        prompt_name: Optional[str] = None,
        prompt_text: Optional[str] = None,
    ) -> Any:
        route = ROUTES.get(use_case, {})
        provider = route.get("provider", "openai")
        model = route.get("model") or self.settings.openai_model or "gpt-4o-mini"
        op = route.get("operation", "chat")
        tokens = max_tokens if max_tokens is not None else route.get("max_tokens")
        temp = temperature if temperature is not None else route.get("temperature")

        if provider != "openai":
            raise NotImplementedError(f"Provider not implemented: {provider}")
        if not self.settings.ai_enabled:
            raise RemoteServiceError("AI is disabled (AI_ENABLED=false)")

        kwargs: Dict[str, Any] = {"model": model, "messages": messages}
        if tokens is not None:
            kwargs["max_tokens"] = tokens
        if temp is not None:
            kwargs["temperature"] = temp

        trace = LLMCallRecord(
            caller=f"llm_client.chat:{use_case}",
            provider=provider,
            model=model,
            operation=op,
            prompt_name=prompt_name,
            prompt_hash=sha256_text(prompt_text),
        )
        t0 = time.monotonic()
        try:
            resp = await self._get_client().chat.completions.create(**kwargs)
        except APIError as e:
            message = _error_message(e)
            trace.duration_ms = int((time.monotonic() - t0) * 1000)
            trace.status = "error"
            trace.error = message
            log_call(trace)
            raise RemoteServiceError(f"API Error: {message}") from e
        trace.duration_ms = int((time.monotonic() - t0) * 1000)

        usage = getattr(resp, "usage", None)
        if usage:
            trace.usage = {
                "prompt_tokens": getattr(usage, "prompt_tokens", None),
                "completion_tokens": getattr(usage, "completion_tokens", None),
                "total_tokens": getattr(usage, "total_tokens", None),
            }
        log_call(trace)
        logger.debug(
            "LLM call finished",
            extra={"step": op, "status": "ok", "duration_ms": trace.duration_ms},
        )
        return resp
