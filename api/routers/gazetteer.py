"""
Router: GET /gazetteer
Zwraca aktualną migawkę pul wczytaną z EntityStore.
"""
from fastapi import APIRouter, Request

from api.dependencies import resolve_gazetteer
from api.schemas import GazetteerOut

router = APIRouter(tags=["gazetteer"])


@router.get("/gazetteer", response_model=GazetteerOut)
async def get_gazetteer(request: Request) -> GazetteerOut:
    gazetteer = await resolve_gazetteer(request, None)
    return GazetteerOut(order=list(gazetteer.order), pools=list(gazetteer.pools), size=len(gazetteer))
