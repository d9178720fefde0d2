from __future__ import annotations


class SummarizerError(Exception):
    """Base class for pipeline failures."""


class NotFoundWithinTimeout(SummarizerError):
    """A mandatory element never showed up in the document."""

    def __init__(self, selector: str, timeout_seconds: float) -> None:
        super().__init__(f"Element {selector} not found within {timeout_seconds:g}s")
        self.selector = selector
        self.timeout_seconds = timeout_seconds


class RemoteServiceError(SummarizerError):
    """The generation service answered with an error (or could not be reached)."""


class EmptyGenerationError(SummarizerError):
    """The generation service answered without any usable choice."""
