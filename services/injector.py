from __future__ import annotations

import logging

from config import selectors
from ports.document import DocumentPort


logger = logging.getLogger(__name__)


async def insert_summary(document: DocumentPort, summary: str) -> bool:
    """Replace the summary marker, placing it right after the headline.

    Returns False when the headline is gone (the next navigation reruns anyway).
    """
    existing = await document.query(selectors.SUMMARY_MARKER_SELECTOR)
    if existing is not None:
        await document.remove(existing)

    # Looked up again: LinkedIn may have re-rendered it since extraction
    title = await document.query(selectors.TITLE_SELECTOR)
    if title is None:
        logger.debug("Headline missing, summary not inserted")
        return False
    await document.insert_after(title, "div", selectors.SUMMARY_MARKER_CLASS, summary)
    return True
