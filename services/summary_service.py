from __future__ import annotations

import logging
from typing import Optional

from models import GenerationResult, ProfileRecord
from ports.llm import LLMClientPort
from services.errors import EmptyGenerationError, RemoteServiceError


logger = logging.getLogger(__name__)

USE_CASE = "profile_summary"
FALLBACK_SUMMARY = "Unable to generate summary at this time."

PROMPT_TEMPLATE = (
    "Here is the LinkedIn data:\n\n"
    "Name: {name}\n\n"
    "Current: {title_line}\n\n"
    "EDUCATION SECTION (RAW):\n{education_text}\n\n"
    "EXPERIENCE SECTION (RAW):\n{experience_text}\n\n\n"
    "Please create in {language} a 2 or 3 lines short structured summary: "
    "mention the current role, years of experience, and interpret any "
    "education details from the raw text."
)


def build_prompt(record: ProfileRecord, language: str = "french") -> str:
    return PROMPT_TEMPLATE.format(
        name=record.name,
        title_line=record.title_line,
        education_text=record.education_text,
        experience_text=record.experience_text,
        language=language,
    )


def _first_choice_text(resp: object) -> str:
    choices = getattr(resp, "choices", None) or []
    if not choices:
        raise EmptyGenerationError("No summary generated")
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None) or ""
    text = content.strip()
    # Blank output counts as no generation: the fallback replaces any previous
    # marker instead of leaving a stale summary from an earlier run in place.
    if not text:
        raise EmptyGenerationError("No summary generated")
    return text


async def request_summary(record: ProfileRecord, llm: LLMClientPort, language: str = "french") -> str:
    """One chat round trip; raises RemoteServiceError or EmptyGenerationError."""
    prompt = build_prompt(record, language)
    logger.debug("Sending to API: %s", prompt, extra={"step": "generate"})
    resp = await llm.chat(
        use_case=USE_CASE,
        messages=[{"role": "user", "content": prompt}],
        prompt_name=USE_CASE,
        prompt_text=prompt,
    )
    return _first_choice_text(resp)


async def generate_summary(
    record: ProfileRecord,
    llm: LLMClientPort,
    *,
    language: Optional[str] = None,
) -> GenerationResult:
    """Summary for ``record``; service failures degrade to FALLBACK_SUMMARY."""
    try:
        text = await request_summary(record, llm, language or "french")
    except (RemoteServiceError, EmptyGenerationError) as e:
        logger.warning(
            "Error generating summary: %s",
            e,
            extra={"step": "generate", "status": "fallback", "error": type(e).__name__},
        )
        return GenerationResult(text=FALLBACK_SUMMARY, degraded=True)
    except Exception:
        logger.exception("Unexpected error generating summary", extra={"step": "generate", "status": "fallback"})
        return GenerationResult(text=FALLBACK_SUMMARY, degraded=True)
    return GenerationResult(text=text)
