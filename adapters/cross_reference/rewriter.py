"""
Adapter: SpanLinkRewriter
Implementuje port LinkRewriter.

Zamiast kolejnych podmian na coraz bardziej zmienionym tekście:
  1. zbiera wszystkie spany względem ORYGINALNEGO tekstu (find_spans)
  2. akceptuje je w kolejności pula → wpis → offset; span, który nachodzi
     na już przyjęty albo na istniejący znacznik, jest odrzucany (pierwsza pula wygrywa)
  3. przepisuje tekst jednym przejściem

Dzięki temu wzorzec encji nigdy nie trafia we wstawiony wcześniej markup,
a ponowne wywołanie na własnym wyniku nic nie zmienia (skip_existing_links=True).
"""
from __future__ import annotations

import bisect
import logging
from collections.abc import Mapping
from html import escape
from typing import Optional
from urllib.parse import quote

from contracts import DEFAULT_ROUTES, EntityType, GazetteerEntry, MatchSpan

from .detector import RegexReferenceDetector
from .gazetteer import Gazetteer
from .markup import SourceType, protected_regions

logger = logging.getLogger("kb_crossref.rewriter")

_ANCHOR_TEMPLATE = (
    '<a href="{href}" class="smart-link smart-link-{type}" '
    'data-type="{type}" data-id="{id}">{label}</a>'
)


class _SpanArena:
    """Posortowane, rozłączne przedziały [start, end)."""

    def __init__(self, taken: Optional[list[tuple[int, int]]] = None) -> None:
        self._starts: list[int] = []
        self._ends: list[int] = []
        for start, end in taken or []:
            self.try_take(start, end)

    def try_take(self, start: int, end: int) -> bool:
        i = bisect.bisect_left(self._starts, start)
        if i > 0 and self._ends[i - 1] > start:
            return False
        if i < len(self._starts) and self._starts[i] < end:
            return False
        self._starts.insert(i, start)
        self._ends.insert(i, end)
        return True


class SpanLinkRewriter:
    def __init__(
        self,
        routes: Optional[Mapping[EntityType, str]] = None,
        skip_existing_links: bool = True,
        detector: Optional[RegexReferenceDetector] = None,
    ) -> None:
        self._routes = dict(DEFAULT_ROUTES if routes is None else routes)
        self._skip_existing = skip_existing_links
        self._detector = detector or RegexReferenceDetector()

    def annotate(self, text: str, gazetteer: Gazetteer, source_type: SourceType = "text") -> str:
        """
        source_type="markdown" additionally protects Markdown links and
        reference definitions, so their targets stay intact.
        """
        if not text or gazetteer.is_empty():
            return text

        arena = _SpanArena(protected_regions(text, source_type) if self._skip_existing else None)
        accepted: list[MatchSpan] = []
        for span in self._detector.find_spans(text, gazetteer):
            if arena.try_take(span.start, span.end):
                accepted.append(span)
            else:
                logger.debug(
                    "Odrzucony span %d:%d %r (%s %s): zajęty",
                    span.start, span.end, span.text, span.entry.entity_type.value, span.entry.entity_id,
                )

        if not accepted:
            return text

        accepted.sort(key=lambda s: s.start)
        parts: list[str] = []
        cursor = 0
        for span in accepted:
            parts.append(text[cursor:span.start])
            parts.append(self.render_link(span.entry, span.text))
            cursor = span.end
        parts.append(text[cursor:])
        return "".join(parts)

    def render_link(self, entry: GazetteerEntry, label: str) -> str:
        """Znacznik odnośnika; etykieta to oryginalna forma powierzchniowa, bez zmian."""
        route = self._routes.get(entry.entity_type, f"/{entry.entity_type.value}s")
        href = f"{route}?id={quote(entry.entity_id, safe='')}"
        return _ANCHOR_TEMPLATE.format(
            href=escape(href, quote=True),
            type=entry.entity_type.value,
            id=escape(entry.entity_id, quote=True),
            label=label,
        )


_DEFAULT = SpanLinkRewriter()


def annotate(text: str, gazetteer: Gazetteer, source_type: SourceType = "text") -> str:
    return _DEFAULT.annotate(text, gazetteer, source_type)
