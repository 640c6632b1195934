"""
Port: LinkRewriter
Odpowiedzialność: zamiana wykrytych wzmianek na klikalne odnośniki (smart links).
"""
from typing import TYPE_CHECKING, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from adapters.cross_reference.gazetteer import Gazetteer


@runtime_checkable
class LinkRewriter(Protocol):
    def annotate(
        self,
        text: str,
        gazetteer: "Gazetteer",
        source_type: Literal["text", "markdown", "html"] = "text",
    ) -> str:
        """
        Returns text with every detected mention wrapped in an anchor.
        The visible label is the original matched substring.
        """
        ...
