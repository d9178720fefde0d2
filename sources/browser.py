from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import Page, async_playwright


_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]


@asynccontextmanager
async def open_page(*, headless: bool = False, user_data_dir: Optional[str] = None) -> AsyncIterator[Page]:
    """Chromium page; a persistent profile dir keeps the LinkedIn session cookies."""
    async with async_playwright() as p:
        if user_data_dir:
            context = await p.chromium.launch_persistent_context(
                user_data_dir, headless=headless, args=_LAUNCH_ARGS
            )
            browser = None
        else:
            browser = await p.chromium.launch(headless=headless, args=_LAUNCH_ARGS)
            context = await browser.new_context()
        try:
            page = context.pages[0] if context.pages else await context.new_page()
            yield page
        finally:
            await context.close()
            if browser is not None:
                await browser.close()
