from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GenerationResult(BaseModel):
    """Summary text ready for injection; ``degraded`` marks the fallback message."""

    text: str
    degraded: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")
