from __future__ import annotations

from typing import Optional

from pipelines.runner import RunContext
from ports.llm import LLMClientPort
from services.summary_service import generate_summary


class GenerateSummary:
    name = "generate"

    def __init__(self, llm: LLMClientPort, *, language: Optional[str] = None) -> None:
        self.llm = llm
        self.language = language

    async def run(self, ctx: RunContext) -> RunContext:
        if ctx.record is None:
            ctx.aborted = True
            return ctx
        ctx.summary = await generate_summary(ctx.record, self.llm, language=self.language)
        return ctx
