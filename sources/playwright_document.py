from __future__ import annotations

import logging
from typing import Callable, List, Optional

from playwright.async_api import ElementHandle, Error as PlaywrightError, Page


logger = logging.getLogger(__name__)

_BINDING = "__profileSummarizerMutation"

# Installed in every new document and in the one already loaded.
_OBSERVER_SCRIPT = """
(() => {
  if (window.__profileSummarizerObserver) return;
  const start = () => {
    window.__profileSummarizerObserver = new MutationObserver(() => {
      if (window.%(binding)s) window.%(binding)s();
    });
    window.__profileSummarizerObserver.observe(document, { subtree: true, childList: true });
  };
  if (document.documentElement) start();
  else document.addEventListener('DOMContentLoaded', start, { once: true });
})();
""" % {"binding": _BINDING}

_INSERT_AFTER = """
(anchor, [tag, className, text]) => {
  const marker = document.createElement(tag);
  marker.className = className;
  marker.textContent = text;
  anchor.parentNode.insertBefore(marker, anchor.nextSibling);
  return marker;
}
"""


class PlaywrightDocument:
    """DocumentPort over a live Playwright page."""

    def __init__(self, page: Page) -> None:
        self.page = page
        self._subscribers: List[Callable[[], None]] = []
        self._installed = False

    async def query(self, selector: str) -> Optional[ElementHandle]:
        return await self.page.query_selector(selector)

    async def closest(self, node: ElementHandle, selector: str) -> Optional[ElementHandle]:
        handle = await node.evaluate_handle("(el, sel) => el.closest(sel)", selector)
        return handle.as_element()

    async def text_content(self, node: ElementHandle) -> str:
        return (await node.text_content()) or ""

    async def inner_text(self, node: ElementHandle) -> str:
        return await node.inner_text()

    async def remove(self, node: ElementHandle) -> None:
        await node.evaluate("el => el.remove()")

    async def insert_after(self, anchor: ElementHandle, tag: str, class_name: str, text: str) -> Optional[ElementHandle]:
        handle = await anchor.evaluate_handle(_INSERT_AFTER, [tag, class_name, text])
        return handle.as_element()

    async def next_frame(self) -> None:
        await self.page.evaluate("() => new Promise(resolve => requestAnimationFrame(() => resolve()))")

    def location(self) -> str:
        return self.page.url

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    async def install_observer(self) -> None:
        """Wire the page's MutationObserver to subscribers; call once per page."""
        if self._installed:
            return
        await self.page.expose_function(_BINDING, self._notify)
        await self.page.add_init_script(_OBSERVER_SCRIPT)
        try:
            await self.page.evaluate(_OBSERVER_SCRIPT)
        except PlaywrightError as e:
            # Navigation raced the evaluate; the init script covers the new document
            logger.debug("Observer install deferred: %s", e)
        self._installed = True

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback()
