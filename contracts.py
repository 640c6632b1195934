"""
contracts.py — Jedyne źródło prawdy dla typów danych w kb-crossref.
Wszystkie moduły importują typy WYŁĄCZNIE stąd.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Warianty ────────────────────────────────────

class EntityType(str, Enum):
    PROCEDURE = "procedure"
    SYSTEM = "system"
    SCRIPT = "script"
    ARTICLE = "article"


# Kolejność pul = polityka rozstrzygania remisów (pierwsza pula wygrywa)
DEFAULT_POOL_ORDER: tuple[EntityType, ...] = (
    EntityType.PROCEDURE,
    EntityType.SYSTEM,
    EntityType.SCRIPT,
    EntityType.ARTICLE,
)


# ─────────────────────────── Encje bazy wiedzy ───────────────────────────

class _StoredEntity(BaseModel):
    """Wspólne kolumny wierszy z zarządzanej bazy."""

    model_config = ConfigDict(extra="ignore")

    id: str
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Procedure(_StoredEntity):
    title: str
    description: str = ""
    content: str = ""
    version: str = ""
    status: Literal["draft", "active", "archived"] = "draft"


class System(_StoredEntity):
    name: str
    description: str = ""
    url: str = ""
    category: str = ""
    instructions: str = ""
    keywords: list[str] = Field(default_factory=list)


class ConversationScript(_StoredEntity):
    title: str
    scenario: str = ""
    script_content: str = ""
    tags: list[str] = Field(default_factory=list)


class KnowledgeArticle(_StoredEntity):
    title: str
    content: str = ""
    keywords: list[str] = Field(default_factory=list)
    category: Literal["products", "procedures", "faq", "support", "general"] = "general"
    status: Literal["draft", "published", "archived"] = "draft"


Entity = Union[Procedure, System, ConversationScript, KnowledgeArticle]

ENTITY_MODELS: dict[EntityType, type[_StoredEntity]] = {
    EntityType.PROCEDURE: Procedure,
    EntityType.SYSTEM: System,
    EntityType.SCRIPT: ConversationScript,
    EntityType.ARTICLE: KnowledgeArticle,
}

# Pole z treścią, w której szukamy odwołań do innych encji
ENTITY_BODY_FIELDS: dict[EntityType, str] = {
    EntityType.PROCEDURE: "content",
    EntityType.SYSTEM: "instructions",
    EntityType.SCRIPT: "script_content",
    EntityType.ARTICLE: "content",
}


# ─────────────────────────── Gazetteer ───────────────────────────────────

class GazetteerEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    entity_type: EntityType
    entity_id: str
    title: str  # surowy tytuł/nazwa, tak jak w bazie


class GazetteerPool(BaseModel):
    entity_type: EntityType
    entries: list[GazetteerEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _entries_match_pool(self) -> "GazetteerPool":
        for entry in self.entries:
            if entry.entity_type != self.entity_type:
                raise ValueError(
                    f"Wpis {entry.entity_id!r} typu {entry.entity_type.value!r} "
                    f"w puli {self.entity_type.value!r}"
                )
        return self


# ─────────────────────────── Wyniki ──────────────────────────────────────

class Reference(BaseModel):
    matched_text: str   # zawsze tytuł, niezależnie od formy (gołej/kwalifikowanej)
    type: EntityType
    id: str
    title: str


class ReferencedItem(BaseModel):
    type: EntityType
    id: str
    title: str


class MatchSpan(BaseModel):
    start: int          # offset znakowy, inclusive
    end: int            # offset znakowy, exclusive
    text: str           # forma powierzchniowa z tekstu
    entry: GazetteerEntry


# ─────────────────────────── Stałe wariantów ─────────────────────────────

# Słowo kwalifikujące: "<słowo> <tytuł>" to druga rozpoznawana forma
DEFAULT_QUALIFIERS: dict[EntityType, str] = {
    EntityType.PROCEDURE: "נוהל",
    EntityType.SYSTEM: "מערכת",
    EntityType.SCRIPT: "תסריט",
    EntityType.ARTICLE: "מאמר",
}

DEFAULT_ROUTES: dict[EntityType, str] = {
    EntityType.PROCEDURE: "/procedures",
    EntityType.SYSTEM: "/systems",
    EntityType.SCRIPT: "/scripts",
    EntityType.ARTICLE: "/knowledge",
}
