from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

from models import GenerationResult, ProfileRecord
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    location: Optional[str] = None
    record: Optional[ProfileRecord] = None
    summary: Optional[GenerationResult] = None
    injected: bool = False
    aborted: bool = False


class Step(Protocol):
    name: str

    async def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step], on_step: Optional[Callable[[Step], None]] = None):
        self.steps = steps
        self.on_step = on_step

    async def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            if ctx.aborted:
                break
            if self.on_step is not None:
                self.on_step(step)
            t0 = time.monotonic()
            ctx = await step.run(ctx)
            logger.info(
                "step finished",
                extra={
                    "step": step.name,
                    "status": "aborted" if ctx.aborted else "ok",
                    "duration_ms": int((time.monotonic() - t0) * 1000),
                    "location": ctx.location or "-",
                },
            )
        return ctx
