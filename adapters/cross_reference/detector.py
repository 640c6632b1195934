"""
Adapter: RegexReferenceDetector
Implementuje port ReferenceDetector: sprawdza, czy tytuł każdej encji
(forma goła lub kwalifikowana) występuje w tekście.

Zasady:
  - kolejność wyników: kolejność pul, potem kolejność wewnątrz puli
  - co najwyżej jedna Reference na encję (test istnienia, nie liczba wystąpień)
  - matched_text to zawsze tytuł, nawet gdy dopasowała forma kwalifikowana
  - brak tłumienia krótszych tytułów przez dłuższe z innych encji ("Sales" i "SalesForce" mogą trafić obie)
"""
from __future__ import annotations

from contracts import EntityType, MatchSpan, Reference, ReferencedItem

from .gazetteer import Gazetteer
from .patterns import normalize_title


class RegexReferenceDetector:
    """Czysta funkcja (tekst, gazetteer) → referencje. Bezstanowy, bezpieczny współbieżnie."""

    def detect(self, text: str, gazetteer: Gazetteer) -> list[Reference]:
        references: list[Reference] = []
        if not text:
            return references

        seen: set[tuple[EntityType, str]] = set()
        for entry, pattern in gazetteer.iter_patterns():
            key = (entry.entity_type, entry.entity_id)
            if key in seen:
                continue
            if pattern.search(text) is None:
                continue
            seen.add(key)
            title = normalize_title(entry.title)
            references.append(Reference(
                matched_text=title,
                type=entry.entity_type,
                id=entry.entity_id,
                title=title,
            ))
        return references

    def referenced_items(self, text: str, gazetteer: Gazetteer) -> list[ReferencedItem]:
        return [
            ReferencedItem(type=ref.type, id=ref.id, title=ref.title)
            for ref in self.detect(text, gazetteer)
        ]

    def find_spans(self, text: str, gazetteer: Gazetteer) -> list[MatchSpan]:
        """Wszystkie wystąpienia (bez nakładania w obrębie jednej encji), per encja."""
        spans: list[MatchSpan] = []
        if not text:
            return spans

        for entry, pattern in gazetteer.iter_patterns():
            for m in pattern.finditer(text):
                if m.end() == m.start():
                    continue
                spans.append(MatchSpan(start=m.start(), end=m.end(), text=m.group(0), entry=entry))
        return spans


_DEFAULT = RegexReferenceDetector()


def detect_references(text: str, gazetteer: Gazetteer) -> list[Reference]:
    return _DEFAULT.detect(text, gazetteer)


def referenced_items(text: str, gazetteer: Gazetteer) -> list[ReferencedItem]:
    return _DEFAULT.referenced_items(text, gazetteer)
