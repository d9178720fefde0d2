from __future__ import annotations

from typing import Any, Callable, Optional, Protocol


Node = Any
Unsubscribe = Callable[[], None]


class DocumentPort(Protocol):
    """Rendered document seen by the summarizer: tree queries plus mutation feed."""

    async def query(self, selector: str) -> Optional[Node]:
        ...

    async def closest(self, node: Node, selector: str) -> Optional[Node]:
        ...

    async def text_content(self, node: Node) -> str:
        ...

    async def inner_text(self, node: Node) -> str:
        ...

    async def remove(self, node: Node) -> None:
        ...

    async def insert_after(self, anchor: Node, tag: str, class_name: str, text: str) -> Node:
        ...

    async def next_frame(self) -> None:
        ...

    def location(self) -> str:
        ...

    def subscribe(self, callback: Callable[[], None]) -> Unsubscribe:
        ...
