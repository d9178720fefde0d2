from __future__ import annotations

import time

from ports.document import DocumentPort, Node
from services.errors import NotFoundWithinTimeout


async def wait_for_element(document: DocumentPort, selector: str, timeout_seconds: float = 10.0) -> Node:
    """Poll ``document`` once per rendered frame until ``selector`` matches.

    Returns the first matching node, or raises NotFoundWithinTimeout once
    ``timeout_seconds`` have elapsed on the monotonic clock.
    """
    deadline = time.monotonic() + timeout_seconds
    while True:
        node = await document.query(selector)
        if node is not None:
            return node
        if time.monotonic() > deadline:
            raise NotFoundWithinTimeout(selector, timeout_seconds)
        await document.next_frame()
