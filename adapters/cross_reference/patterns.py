"""
Cross-reference — budowa wzorców dopasowania z tytułów encji.

Rozpoznawane formy dla tytułu T wariantu V:
  - goła:          T
  - kwalifikowana: "<słowo_V> T"   (np. "נוהל החזרת מוצר")

Tytuły pisze użytkownik, więc zawsze są escape'owane przed wstawieniem do wzorca.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

logger = logging.getLogger("kb_crossref.patterns")


def normalize_title(title: Optional[str]) -> str:
    """Zwraca tytuł bez białych znaków na brzegach ("" dla None)."""
    return (title or "").strip()


def build_pattern(title: Optional[str], qualifier: Optional[str] = None) -> Optional[re.Pattern[str]]:
    """
    Kompiluje wzorzec "kwalifikator\\s+tytuł|tytuł" (case-insensitive, Unicode).

    Zwraca None dla pustego tytułu: pusty wzorzec pasowałby wszędzie.
    Nigdy nie rzuca wyjątku; błąd kompilacji jest logowany, encja jest pomijana.
    """
    literal = normalize_title(title)
    if not literal:
        return None

    bare = re.escape(literal)
    word = normalize_title(qualifier)
    source = f"{re.escape(word)}\\s+{bare}|{bare}" if word else bare

    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as exc:
        logger.warning("Nie udało się skompilować wzorca dla %r: %s", literal, exc)
        return None
