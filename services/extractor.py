from __future__ import annotations

import asyncio
import logging
from typing import Optional

from config import selectors
from models import ProfileRecord
from ports.document import DocumentPort
from services.waiter import wait_for_element


logger = logging.getLogger(__name__)


async def read_required_text(document: DocumentPort, selector: str, timeout_seconds: float) -> str:
    """Wait for a node that always renders eventually; raises NotFoundWithinTimeout."""
    node = await wait_for_element(document, selector, timeout_seconds)
    return (await document.text_content(node)).strip()


async def read_optional_section(document: DocumentPort, anchor_selector: str) -> str:
    """Best-effort text of the profile card around ``anchor_selector``.

    A single immediate query: a missing card is a normal profile state, so any
    miss gives an empty string.
    """
    anchor = await document.query(anchor_selector)
    if anchor is None:
        return ""
    section = await document.closest(anchor, selectors.PROFILE_CARD_SECTION)
    if section is None:
        return ""
    return (await document.inner_text(section)).strip()


async def extract_profile_info(
    document: DocumentPort,
    *,
    warmup_seconds: float = 5.0,
    timeout_seconds: float = 10.0,
) -> Optional[ProfileRecord]:
    """Scrape the current profile page; None when it could not be extracted."""
    try:
        # LinkedIn renders client-side after the load event; there is no ready signal.
        await asyncio.sleep(warmup_seconds)

        name = await read_required_text(document, selectors.NAME_SELECTOR, timeout_seconds)
        title_line = await read_required_text(document, selectors.TITLE_SELECTOR, timeout_seconds)
        education_text = await read_optional_section(document, selectors.EDUCATION_ANCHOR)
        experience_text = await read_optional_section(document, selectors.EXPERIENCE_ANCHOR)

        return ProfileRecord(
            name=name,
            title_line=title_line,
            education_text=education_text,
            experience_text=experience_text,
        )
    except Exception as e:
        logger.error(
            "Error extracting profile info: %s",
            e,
            extra={"step": "extract", "status": "error", "error": type(e).__name__},
        )
        return None
