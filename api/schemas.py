"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from contracts import EntityType, GazetteerPool, Reference, ReferencedItem


# ─────────────────────────── gazetteer w żądaniu ─────────────────

class GazetteerIn(BaseModel):
    """Migawka podana wprost; kolejność `pools` = kolejność rozstrzygania."""

    pools: list[GazetteerPool]


# ─────────────────────────── /references ─────────────────────────

class DetectRequest(BaseModel):
    text: str = Field(default="", max_length=200_000)
    source_type: Literal["text", "markdown", "html"] = "text"
    gazetteer: Optional[GazetteerIn] = None  # brak → pule z EntityStore


class DetectResponse(BaseModel):
    references: list[Reference]
    processing_time_ms: int


class ItemsResponse(BaseModel):
    items: list[ReferencedItem]


class AnnotateRequest(BaseModel):
    text: str = Field(default="", max_length=200_000)
    source_type: Literal["text", "markdown", "html"] = "text"  # markdown: linki [..](..) nietykalne
    gazetteer: Optional[GazetteerIn] = None


class AnnotateResponse(BaseModel):
    text: str


# ─────────────────────────── /gazetteer ──────────────────────────

class GazetteerOut(BaseModel):
    order: list[EntityType]
    pools: list[GazetteerPool]
    size: int


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    store: str
    version: str


# ─────────────────────────── /entities ───────────────────────────

class EntityReferencesResponse(BaseModel):
    type: EntityType
    id: str
    title: str
    references: list[Reference]
    text: str  # treść z odnośnikami
