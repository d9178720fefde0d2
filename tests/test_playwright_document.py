from __future__ import annotations

import asyncio

import pytest

pytest.importorskip("playwright")

from playwright.async_api import Error as PlaywrightError, async_playwright

from config import selectors
from services.extractor import extract_profile_info, read_optional_section
from services.injector import insert_summary
from sources.playwright_document import PlaywrightDocument
from tests.fixtures import profile_html


def _run_on_page(html: str, scenario):
    """Run ``scenario(page)`` against ``html`` in headless Chromium."""

    async def main():
        async with async_playwright() as p:
            try:
                browser = await p.chromium.launch(headless=True)
            except PlaywrightError as e:
                pytest.skip(f"Chromium not available: {e}")
            try:
                page = await browser.new_page()
                await page.set_content(html)
                return await scenario(page)
            finally:
                await browser.close()

    return asyncio.run(main())


_AFTER_TITLE = """
(sel) => {
  const next = document.querySelector(sel).nextElementSibling;
  return next ? [next.tagName, next.className, next.textContent] : null;
}
"""


def test_marker_lands_after_title_and_is_replaced():
    async def scenario(page):
        doc = PlaywrightDocument(page)
        await insert_summary(doc, "premier")
        await insert_summary(doc, "Résumé court.")
        after = await page.evaluate(_AFTER_TITLE, selectors.TITLE_SELECTOR)
        count = len(await page.query_selector_all(selectors.SUMMARY_MARKER_SELECTOR))
        return after, count

    after, count = _run_on_page(profile_html(), scenario)
    assert after == ["DIV", selectors.SUMMARY_MARKER_CLASS, "Résumé court."]
    assert count == 1


def test_extracts_record_from_live_page():
    async def scenario(page):
        return await extract_profile_info(PlaywrightDocument(page), warmup_seconds=0, timeout_seconds=1.0)

    record = _run_on_page(profile_html(), scenario)
    assert record.name == "A. Dupont"
    assert record.title_line == "Ingénieur chez X"
    assert "École Polytechnique" in record.education_text
    assert "5 ans chez X" in record.experience_text


def test_closest_is_none_outside_a_profile_card():
    html = profile_html(education=False).replace(
        "</main>", '<div><div id="education" class="pv-profile-card__anchor"></div>Formation</div></main>'
    )

    async def scenario(page):
        doc = PlaywrightDocument(page)
        anchor = await doc.query(selectors.EDUCATION_ANCHOR)
        closest = await doc.closest(anchor, selectors.PROFILE_CARD_SECTION)
        return closest, await read_optional_section(doc, selectors.EDUCATION_ANCHOR)

    closest, text = _run_on_page(html, scenario)
    assert closest is None
    assert text == ""


def test_dom_change_notifies_subscribers():
    async def scenario(page):
        doc = PlaywrightDocument(page)
        seen = []
        doc.subscribe(lambda: seen.append(doc.location()))
        await doc.install_observer()
        await page.evaluate("() => { document.body.appendChild(document.createElement('p')); }")
        for _ in range(200):
            if seen:
                break
            await asyncio.sleep(0.01)
        await doc.next_frame()
        return seen

    seen = _run_on_page(profile_html(), scenario)
    assert seen
