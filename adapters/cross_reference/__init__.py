from .detector import RegexReferenceDetector, detect_references, referenced_items
from .gazetteer import Gazetteer, to_entry
from .markup import plain_text, protected_regions
from .patterns import build_pattern, normalize_title
from .rewriter import SpanLinkRewriter, annotate

__all__ = [
    "Gazetteer",
    "RegexReferenceDetector",
    "SpanLinkRewriter",
    "annotate",
    "build_pattern",
    "detect_references",
    "normalize_title",
    "plain_text",
    "protected_regions",
    "referenced_items",
    "to_entry",
]
