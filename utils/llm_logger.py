from __future__ import annotations

import hashlib
import json
import os
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


def sha256_text(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@dataclass
class LLMCallRecord:
    caller: str
    provider: str
    model: Optional[str]
    operation: str
    prompt_name: Optional[str] = None
    prompt_hash: Optional[str] = None
    duration_ms: Optional[int] = None
    status: str = "ok"
    error: Optional[str] = None
    usage: Dict[str, Any] = field(default_factory=dict)
    location: Optional[str] = None
    ts: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_payload(self) -> Dict[str, Any]:
        payload = asdict(self)
        if not payload["location"]:
            payload.pop("location")
        run_id = os.getenv("RUN_ID")
        if run_id:
            payload["run_id"] = run_id
        return payload


def _append_jsonl(path: Path, payload: Dict[str, Any]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except OSError:
        # Never break the app on logging failures
        return


def log_call(record: LLMCallRecord) -> None:
    """Append one JSON line describing an LLM call if tracing is enabled.

    Controlled by LLM_TRACE / LLM_LOG_PATH in config/settings.py
    """
    from config.settings import get_settings

    # Tests monkeypatch env between calls
    get_settings.cache_clear()
    settings = get_settings()
    if not settings.llm_trace:
        return
    _append_jsonl(Path(settings.llm_log_path), record.to_payload())
