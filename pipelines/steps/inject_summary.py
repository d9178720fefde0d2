from __future__ import annotations

from pipelines.runner import RunContext
from ports.document import DocumentPort
from services.injector import insert_summary


class InjectSummary:
    name = "inject"

    def __init__(self, document: DocumentPort) -> None:
        self.document = document

    async def run(self, ctx: RunContext) -> RunContext:
        if ctx.summary is not None and ctx.summary.text:
            ctx.injected = await insert_summary(self.document, ctx.summary.text)
        return ctx
