from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from config.settings import Settings, get_settings
from pipelines.runner import Pipeline, RunContext, Step
from pipelines.steps import ExtractProfile, GenerateSummary, InjectSummary
from ports.document import DocumentPort
from ports.llm import LLMClientPort
from utils.logging_setup import bind_run


logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    GENERATING = "generating"
    INJECTING = "injecting"
    WATCHING = "watching"


_STEP_PHASES = {
    ExtractProfile.name: Phase.EXTRACTING,
    GenerateSummary.name: Phase.GENERATING,
    InjectSummary.name: Phase.INJECTING,
}


@dataclass
class RunState:
    last_location: Optional[str] = None
    runs_started: int = 0
    phase: Phase = Phase.IDLE


class ProfileSummarizer:
    """Runs extract -> generate -> inject, and again after each in-page navigation.

    A navigation seen while a run is still in flight cancels that run and
    starts a fresh one, so at most one run touches the summary marker.
    """

    def __init__(
        self,
        document: DocumentPort,
        llm: LLMClientPort,
        *,
        settings: Optional[Settings] = None,
        warmup_seconds: Optional[float] = None,
        timeout_seconds: Optional[float] = None,
        language: Optional[str] = None,
    ) -> None:
        settings = settings or get_settings()
        self.document = document
        self.llm = llm
        self.warmup_seconds = settings.warmup_seconds if warmup_seconds is None else warmup_seconds
        self.timeout_seconds = settings.element_timeout_seconds if timeout_seconds is None else timeout_seconds
        self.language = language or settings.summary_language
        self.state = RunState()
        self.last_context: Optional[RunContext] = None
        self._task: Optional[asyncio.Task] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    def build_pipeline(self) -> Pipeline:
        return Pipeline(
            [
                ExtractProfile(
                    self.document,
                    warmup_seconds=self.warmup_seconds,
                    timeout_seconds=self.timeout_seconds,
                ),
                GenerateSummary(self.llm, language=self.language),
                InjectSummary(self.document),
            ],
            on_step=self._enter_phase,
        )

    def _enter_phase(self, step: Step) -> None:
        self.state.phase = _STEP_PHASES.get(step.name, self.state.phase)
        bind_run(phase=self.state.phase.value)

    async def run_once(self) -> RunContext:
        ctx = RunContext(location=self.document.location())
        bind_run(location=ctx.location, phase=Phase.IDLE.value)
        try:
            ctx = await self.build_pipeline().run(ctx)
        except Exception as e:
            logger.exception(
                "Error in summarizer run",
                extra={"status": "error", "error": type(e).__name__, "location": ctx.location},
            )
            ctx.aborted = True
        finally:
            # A cancelled run must not clobber the phase of its replacement
            if self._task is None or self._task.done() or asyncio.current_task() is self._task:
                self.state.phase = Phase.WATCHING
        self.last_context = ctx
        return ctx

    def start(self) -> asyncio.Task:
        """Handle the page load signal: arm the mutation watch and run once.

        A new document fires its observer before `load`, so a navigation to
        this location may already have a run in flight; that run is kept.
        """
        location = self.document.location()
        if location == self.state.last_location and self._task is not None and not self._task.done():
            return self._task
        self.state.last_location = location
        if self._unsubscribe is None:
            self._unsubscribe = self.document.subscribe(self.on_mutation)
        return self._launch()

    def on_mutation(self) -> None:
        location = self.document.location()
        if location == self.state.last_location:
            # Same page: lazy images, our own marker, etc.
            return
        self.state.last_location = location
        logger.info("Navigation detected", extra={"location": location})
        self._launch()

    def _launch(self) -> asyncio.Task:
        if self._task is not None and not self._task.done():
            logger.info("Cancelling in-flight run", extra={"status": "cancelled"})
            self._task.cancel()
        self.state.runs_started += 1
        self._task = asyncio.get_running_loop().create_task(self.run_once())
        return self._task

    async def wait_idle(self) -> Optional[RunContext]:
        """Wait until no run is in flight; returns the last run's context."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        if self._task is None or self._task.cancelled():
            return None
        return self._task.result()

    async def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.wait({self._task})
        self.state.phase = Phase.IDLE
