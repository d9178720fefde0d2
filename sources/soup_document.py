from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable, List, Optional

import soupsieve
from bs4 import BeautifulSoup, Tag


class SoupDocument:
    """Offline DocumentPort over a saved profile page.

    Structural changes (marker insert/remove, ``set_html``, ``navigate``) are
    reported to subscribers the way a MutationObserver on ``document`` would.
    """

    def __init__(self, html: str, location: str = "about:blank", *, frame_interval_seconds: float = 1 / 60) -> None:
        self._soup = BeautifulSoup(html, "html.parser")
        self._location = location
        self._subscribers: List[Callable[[], None]] = []
        self.frame_interval_seconds = frame_interval_seconds

    @classmethod
    def from_file(cls, path: str | Path, location: Optional[str] = None, **kwargs) -> "SoupDocument":
        path = Path(path)
        html = path.read_text(encoding="utf-8")
        return cls(html, location or path.resolve().as_uri(), **kwargs)

    async def query(self, selector: str) -> Optional[Tag]:
        return self._soup.select_one(selector)

    async def closest(self, node: Tag, selector: str) -> Optional[Tag]:
        return soupsieve.closest(selector, node)

    async def text_content(self, node: Tag) -> str:
        return node.get_text()

    async def inner_text(self, node: Tag) -> str:
        lines = (" ".join(chunk.split()) for chunk in node.stripped_strings)
        return "\n".join(line for line in lines if line)

    async def remove(self, node: Tag) -> None:
        node.decompose()
        self._notify()

    async def insert_after(self, anchor: Tag, tag: str, class_name: str, text: str) -> Tag:
        marker = self._soup.new_tag(tag, attrs={"class": class_name})
        marker.string = text
        anchor.insert_after(marker)
        self._notify()
        return marker

    async def next_frame(self) -> None:
        await asyncio.sleep(self.frame_interval_seconds)

    def location(self) -> str:
        return self._location

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def set_html(self, html: str) -> None:
        """Re-render in place; the location is unchanged."""
        self._soup = BeautifulSoup(html, "html.parser")
        self._notify()

    def navigate(self, location: str, html: Optional[str] = None) -> None:
        """Client-side route change: new URL, optionally new content, no reload."""
        self._location = location
        if html is not None:
            self._soup = BeautifulSoup(html, "html.parser")
        self._notify()

    def render(self) -> str:
        return str(self._soup)

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback()
