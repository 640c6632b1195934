import time

import pytest

from adapters.cross_reference import Gazetteer, annotate
from adapters.cross_reference.markup import plain_text, protected_regions
from contracts import System


def test_plain_text_passes_text_through():
    text = "a **b** <i>c</i>"

    assert plain_text(text) == text


def test_plain_text_strips_markdown():
    text = "# כותרת\n\nראה **נוהל Alpha**.\n\n- CRM\n- FAQ"

    cleaned = plain_text(text, "markdown")

    assert "ראה נוהל Alpha." in cleaned
    assert "**" not in cleaned
    assert "<" not in cleaned
    assert "CRM\nFAQ" in cleaned


def test_plain_text_strips_html():
    cleaned = plain_text('<p>open <a href="/crm-guide">CRM</a></p>', "html")

    assert cleaned == "open CRM"


def test_protected_regions_cover_anchors_and_tags():
    text = 'x <a href="/p">Alpha</a> <b>y</b>'

    regions = protected_regions(text)

    assert regions[0] == (2, 24)
    assert [text[s:e] for s, e in regions[1:]] == ["<b>", "</b>"]


def test_protected_regions_ignore_comparison_signs():
    assert protected_regions("1 < 2 > 0") == []


def test_protected_regions_handle_unclosed_anchors():
    text = "<a>x<a>y</a> CRM"

    regions = protected_regions(text)

    assert [text[s:e] for s, e in regions] == ["<a>", "<a>y</a>"]


def test_protected_regions_cover_markdown_links_only_for_markdown():
    text = "See [the guide](/crm-guide) and CRM\n[crm]: https://crm.example\n"

    assert protected_regions(text) == []
    covered = [text[s:e] for s, e in protected_regions(text, "markdown")]
    assert covered == ["[the guide](/crm-guide)", "[crm]: https://crm.example"]


def _elapsed(fn, *args) -> float:
    t0 = time.perf_counter()
    fn(*args)
    return time.perf_counter() - t0


@pytest.mark.parametrize("unit", ["<b>", "<a>x", "<a href='/p'>"])
def test_protected_regions_scale_linearly(unit):
    small = _elapsed(protected_regions, unit * 20_000)
    large = _elapsed(protected_regions, unit * 80_000)

    # 4x input: linear gives ~4x, quadratic ~16x
    assert large < 10 * max(small, 0.05)


@pytest.mark.parametrize("unit", ["<b>", "<a>x"])
def test_annotate_scales_linearly_on_tag_heavy_text(unit):
    gaz = Gazetteer.from_entities(systems=[System(id="s1", name="CRM")])

    small = _elapsed(annotate, unit * 20_000 + " CRM", gaz)
    large = _elapsed(annotate, unit * 80_000 + " CRM", gaz)

    assert large < 10 * max(small, 0.05)
