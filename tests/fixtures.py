from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import List, Optional

from bs4 import BeautifulSoup

from config import selectors


NAME_HTML = '<h1 class="text-heading-xlarge inline t-24 v-align-middle break-words">{name}</h1>'
TITLE_HTML = '<div class="text-body-medium break-words">{title}</div>'
EDUCATION_HTML = """
<section data-view-name="profile-card" class="artdeco-card">
  <div id="education" class="pv-profile-card__anchor"></div>
  <h2>Formation</h2>
  <ul>
    <li>École   Polytechnique</li>
    <li>Diplôme d'ingénieur, 2012 - 2015</li>
  </ul>
</section>
"""
EXPERIENCE_HTML = """
<section data-view-name="profile-card" class="artdeco-card">
  <div id="experience" class="pv-profile-card__anchor"></div>
  <h2>Expérience</h2>
  <p>5 ans chez X</p>
</section>
"""


def profile_html(
    *,
    name: Optional[str] = "A. Dupont",
    title: Optional[str] = "Ingénieur chez X",
    education: bool = True,
    experience: bool = True,
) -> str:
    top = []
    if name is not None:
        top.append(NAME_HTML.format(name=f"\n   {name}  \n"))
    if title is not None:
        top.append(TITLE_HTML.format(title=f" {title} "))
    parts = ['<html><body><main><section class="artdeco-card"><div class="ph5">']
    parts.extend(top)
    parts.append("</div></section>")
    if education:
        parts.append(EDUCATION_HTML)
    if experience:
        parts.append(EXPERIENCE_HTML)
    parts.append("</main></body></html>")
    return "".join(parts)


def markers(html: str) -> List:
    return BeautifulSoup(html, "html.parser").select(selectors.SUMMARY_MARKER_SELECTOR)


def node_after_title(html: str):
    soup = BeautifulSoup(html, "html.parser")
    title = soup.select_one(selectors.TITLE_SELECTOR)
    return title.find_next_sibling() if title is not None else None


def completion(content: Optional[str]) -> SimpleNamespace:
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class StubLLM:
    """LLMClientPort double returning canned replies in order."""

    def __init__(self, *replies, error: Optional[Exception] = None, gate: Optional[asyncio.Event] = None):
        self.replies = list(replies) or ["Résumé court."]
        self.error = error
        self.gate = gate
        self.calls: List[dict] = []

    async def chat(self, **kwargs):
        self.calls.append(kwargs)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        idx = min(len(self.calls), len(self.replies)) - 1
        reply = self.replies[idx]
        if isinstance(reply, SimpleNamespace):
            return reply
        return completion(reply)
