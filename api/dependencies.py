"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.cross_reference import Gazetteer
from adapters.entity_store import load_gazetteer
from api.schemas import GazetteerIn
from config import Settings
from ports.entity_store import EntityStore
from ports.link_rewriter import LinkRewriter
from ports.reference_detector import ReferenceDetector


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_entity_store(request: Request) -> EntityStore:
    return request.app.state.entity_store


def get_detector(request: Request) -> ReferenceDetector:
    return request.app.state.detector


def get_rewriter(request: Request) -> LinkRewriter:
    return request.app.state.rewriter


async def resolve_gazetteer(request: Request, inline: GazetteerIn | None) -> Gazetteer:
    """Migawka z żądania albo świeżo z EntityStore (bez cache)."""
    settings = get_settings(request)
    if inline is not None:
        return Gazetteer(inline.pools, qualifiers=settings.qualifiers)
    return await load_gazetteer(
        get_entity_store(request),
        order=settings.pool_order,
        qualifiers=settings.qualifiers,
    )
