"""
Router: GET /entities/{entity_type}/{entity_id}/references

Renderuje treść zapisanej encji z odnośnikami do innych encji
i zwraca listę wykrytych odwołań. Sama encja nie linkuje do siebie.
Nieznane ID → KeyError → 404 (globalny handler).
"""
from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Query, Request

from adapters.cross_reference import plain_text
from api.dependencies import get_detector, get_entity_store, get_rewriter, resolve_gazetteer
from api.schemas import EntityReferencesResponse
from contracts import ENTITY_BODY_FIELDS, EntityType
from ports.entity_store import EntityStore
from ports.link_rewriter import LinkRewriter
from ports.reference_detector import ReferenceDetector

router = APIRouter(prefix="/entities", tags=["entities"])


@router.get("/{entity_type}/{entity_id}/references", response_model=EntityReferencesResponse)
async def entity_references(
    entity_type: EntityType,
    entity_id: str,
    request: Request,
    source_type: Literal["text", "markdown", "html"] = Query("text"),
    store: EntityStore = Depends(get_entity_store),
    detector: ReferenceDetector = Depends(get_detector),
    rewriter: LinkRewriter = Depends(get_rewriter),
) -> EntityReferencesResponse:
    entity = await store.get_entity(entity_type, entity_id)
    body = getattr(entity, ENTITY_BODY_FIELDS[entity_type]) or ""

    gazetteer = (await resolve_gazetteer(request, None)).without(entity_type, entity_id)
    return EntityReferencesResponse(
        type=entity_type,
        id=entity_id,
        title=getattr(entity, "name", None) or getattr(entity, "title", ""),
        references=detector.detect(plain_text(body, source_type), gazetteer),
        text=rewriter.annotate(body, gazetteer, source_type),
    )
