"""
Składanie migawki Gazetteer z EntityStore: świeżo, przy każdym wywołaniu.
"""
from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from typing import Optional

from adapters.cross_reference.gazetteer import Gazetteer
from contracts import DEFAULT_POOL_ORDER, EntityType
from ports.entity_store import EntityStore


async def load_gazetteer(
    store: EntityStore,
    order: Sequence[EntityType] = DEFAULT_POOL_ORDER,
    qualifiers: Optional[Mapping[EntityType, str]] = None,
) -> Gazetteer:
    procedures, systems, scripts, articles = await asyncio.gather(
        store.list_procedures(),
        store.list_systems(),
        store.list_scripts(),
        store.list_articles(),
    )
    return Gazetteer.from_entities(
        procedures=procedures,
        systems=systems,
        scripts=scripts,
        articles=articles,
        order=order,
        qualifiers=qualifiers,
    )
