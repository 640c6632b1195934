"""
Router: POST /references/detect, /references/items, /references/annotate

Wykrywanie i linkowanie wzmianek o procedurach, systemach, skryptach
i artykułach w dowolnym tekście.
"""
from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Request

from adapters.cross_reference import plain_text
from api.dependencies import get_detector, get_rewriter, resolve_gazetteer
from api.schemas import (
    AnnotateRequest,
    AnnotateResponse,
    DetectRequest,
    DetectResponse,
    ItemsResponse,
)
from ports.link_rewriter import LinkRewriter
from ports.reference_detector import ReferenceDetector

router = APIRouter(prefix="/references", tags=["references"])


@router.post("/detect", response_model=DetectResponse)
async def detect(
    body: DetectRequest,
    request: Request,
    detector: ReferenceDetector = Depends(get_detector),
) -> DetectResponse:
    t0 = time.monotonic()
    gazetteer = await resolve_gazetteer(request, body.gazetteer)
    references = detector.detect(plain_text(body.text, body.source_type), gazetteer)
    processing_time_ms = int((time.monotonic() - t0) * 1000)
    return DetectResponse(references=references, processing_time_ms=processing_time_ms)


@router.post("/items", response_model=ItemsResponse)
async def items(
    body: DetectRequest,
    request: Request,
    detector: ReferenceDetector = Depends(get_detector),
) -> ItemsResponse:
    gazetteer = await resolve_gazetteer(request, body.gazetteer)
    return ItemsResponse(
        items=detector.referenced_items(plain_text(body.text, body.source_type), gazetteer)
    )


@router.post("/annotate", response_model=AnnotateResponse)
async def annotate(
    body: AnnotateRequest,
    request: Request,
    rewriter: LinkRewriter = Depends(get_rewriter),
) -> AnnotateResponse:
    gazetteer = await resolve_gazetteer(request, body.gazetteer)
    return AnnotateResponse(text=rewriter.annotate(body.text, gazetteer, body.source_type))
