from __future__ import annotations

import logging

from pipelines.runner import RunContext
from ports.document import DocumentPort
from services.extractor import extract_profile_info


logger = logging.getLogger(__name__)


class ExtractProfile:
    name = "extract"

    def __init__(self, document: DocumentPort, *, warmup_seconds: float, timeout_seconds: float) -> None:
        self.document = document
        self.warmup_seconds = warmup_seconds
        self.timeout_seconds = timeout_seconds

    async def run(self, ctx: RunContext) -> RunContext:
        ctx.record = await extract_profile_info(
            self.document,
            warmup_seconds=self.warmup_seconds,
            timeout_seconds=self.timeout_seconds,
        )
        if ctx.record is None:
            logger.info("Could not extract profile information", extra={"step": self.name, "status": "aborted"})
            ctx.aborted = True
        return ctx
