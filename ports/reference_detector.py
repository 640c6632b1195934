"""
Port: ReferenceDetector
Odpowiedzialność: wykrywanie wzmianek o znanych encjach w tekście (bez modyfikacji tekstu).
"""
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from contracts import MatchSpan, Reference, ReferencedItem

if TYPE_CHECKING:
    from adapters.cross_reference.gazetteer import Gazetteer


@runtime_checkable
class ReferenceDetector(Protocol):
    def detect(self, text: str, gazetteer: "Gazetteer") -> list[Reference]:
        """
        Returns at most one Reference per entity whose title (bare or
        qualified) occurs in text, in pool order then intra-pool order.
        """
        ...

    def referenced_items(self, text: str, gazetteer: "Gazetteer") -> list[ReferencedItem]:
        """Same as detect(), projected to (type, id, title)."""
        ...

    def find_spans(self, text: str, gazetteer: "Gazetteer") -> list[MatchSpan]:
        """Returns every occurrence with char offsets, per entity in gazetteer order."""
        ...
