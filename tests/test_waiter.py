from __future__ import annotations

import asyncio
import time

import pytest

from config import selectors
from services.errors import NotFoundWithinTimeout
from services.waiter import wait_for_element
from sources.soup_document import SoupDocument
from tests.fixtures import profile_html


def test_resolves_immediately_when_present():
    doc = SoupDocument(profile_html())
    node = asyncio.run(wait_for_element(doc, selectors.NAME_SELECTOR, 0))
    assert node.get_text().strip() == "A. Dupont"


def test_resolves_once_element_renders_later():
    doc = SoupDocument(profile_html(name=None), frame_interval_seconds=0.005)

    async def scenario():
        asyncio.get_running_loop().call_later(0.05, doc.set_html, profile_html())
        return await wait_for_element(doc, selectors.NAME_SELECTOR, 2.0)

    node = asyncio.run(scenario())
    assert "A. Dupont" in node.get_text()


def test_times_out_on_missing_element():
    doc = SoupDocument(profile_html(name=None), frame_interval_seconds=0.005)
    t0 = time.monotonic()
    with pytest.raises(NotFoundWithinTimeout) as exc:
        asyncio.run(wait_for_element(doc, selectors.NAME_SELECTOR, 0.05))
    assert time.monotonic() - t0 >= 0.05
    assert exc.value.selector == selectors.NAME_SELECTOR
    assert "not found within" in str(exc.value)
