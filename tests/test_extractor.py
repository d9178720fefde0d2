from __future__ import annotations

import asyncio

from config import selectors
from services.extractor import extract_profile_info, read_optional_section
from sources.soup_document import SoupDocument
from tests.fixtures import profile_html


def _extract(doc, timeout=0.05):
    return asyncio.run(extract_profile_info(doc, warmup_seconds=0, timeout_seconds=timeout))


def test_extracts_all_fragments():
    record = _extract(SoupDocument(profile_html()))
    assert record is not None
    assert record.name == "A. Dupont"
    assert record.title_line == "Ingénieur chez X"
    assert record.education_text.splitlines() == [
        "Formation",
        "École Polytechnique",
        "Diplôme d'ingénieur, 2012 - 2015",
    ]
    assert record.experience_text == "Expérience\n5 ans chez X"


def test_missing_name_returns_none():
    doc = SoupDocument(profile_html(name=None), frame_interval_seconds=0.005)
    assert _extract(doc) is None


def test_missing_title_returns_none():
    doc = SoupDocument(profile_html(title=None), frame_interval_seconds=0.005)
    assert _extract(doc) is None


def test_optional_sections_default_to_empty():
    record = _extract(SoupDocument(profile_html(education=False, experience=False)))
    assert record is not None
    assert record.name == "A. Dupont"
    assert record.education_text == ""
    assert record.experience_text == ""


def test_anchor_outside_profile_card_is_empty():
    html = profile_html(education=False).replace(
        "</main>", '<div><div id="education" class="pv-profile-card__anchor"></div>Formation</div></main>'
    )
    doc = SoupDocument(html)
    assert asyncio.run(read_optional_section(doc, selectors.EDUCATION_ANCHOR)) == ""


def test_experience_anchor_may_be_the_section_itself():
    html = profile_html(experience=False).replace(
        "</main>",
        '<section data-view-name="profile-card"><section id="experience" class="pv-profile-card__anchor">'
        "<p>Chef de projet</p></section></section></main>",
    )
    record = _extract(SoupDocument(html))
    assert record.experience_text == "Chef de projet"
