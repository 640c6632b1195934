"""
markup.py - visible-text extraction and protected regions for cross-referencing.

plain_text():
1) Markdown -> HTML (markdown, "extra" + "nl2br")
2) Drop tags with BeautifulSoup, block boundaries become line breaks
3) Collapse blank lines

protected_regions(): offsets of existing anchors, tags and (for Markdown)
links and reference definitions, which the link rewriter must never write into.
One finditer pass. An anchor body never runs past the next "<a", tags and
Markdown forms stop at "<" or at the line end.
"""
from __future__ import annotations

import re
from typing import Literal

import markdown
from bs4 import BeautifulSoup

SourceType = Literal["text", "markdown", "html"]

_BLOCK_TAGS = (
    "p", "div", "section", "article", "li", "blockquote", "pre",
    "h1", "h2", "h3", "h4", "h5", "h6", "tr",
)

# Whole anchor element (body may not open another anchor), then any other tag.
_ANCHOR = r"<a\b[^<>]*>(?:(?!<a\b|</a\s*>).)*</a\s*>"
_TAG = r"</?[A-Za-z][^<>]*>"
# Markdown: inline link or image, reference definition line.
_MD_LINK = r"!?\[[^\[\]\n]*\]\([^()\n]*\)"
_MD_REF_DEF = r"^[ ]{0,3}\[[^\[\]\n]+\]:[^\n]*"

_MARKUP_RE = re.compile(f"{_ANCHOR}|{_TAG}", re.IGNORECASE | re.DOTALL)
_MARKDOWN_RE = re.compile(
    f"{_ANCHOR}|{_TAG}|{_MD_LINK}|{_MD_REF_DEF}", re.IGNORECASE | re.DOTALL | re.MULTILINE
)


def plain_text(text: str, source_type: SourceType = "text") -> str:
    """Return the text a reader actually sees; "text" is passed through unchanged."""
    if source_type == "text" or not text:
        return text

    html = markdown.markdown(text, extensions=["extra", "nl2br"]) if source_type == "markdown" else text
    soup = BeautifulSoup(html, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.append("\n")

    visible = soup.get_text(separator="", strip=False)
    visible = re.sub(r"\n{2,}", "\n", visible.replace("\r\n", "\n"))
    return visible.strip("\n")


def protected_regions(text: str, source_type: SourceType = "text") -> list[tuple[int, int]]:
    """Sorted, non-overlapping (start, end) ranges covered by markup."""
    pattern = _MARKDOWN_RE if source_type == "markdown" else _MARKUP_RE
    return [m.span() for m in pattern.finditer(text)]
