"""
PostgresEntityStore — implementacja portu EntityStore na PostgreSQL.

Tylko odczyt: schemat i zapis należą do zarządzanej bazy (tabele
procedures, systems, conversation_scripts, knowledge_articles).
Używa asyncpg bezpośrednio (bez ORM).
"""
from __future__ import annotations

from typing import Any, TypeVar

import asyncpg
from pydantic import BaseModel

from contracts import (
    ENTITY_MODELS,
    ConversationScript,
    Entity,
    EntityType,
    KnowledgeArticle,
    Procedure,
    System,
)

M = TypeVar("M", bound=BaseModel)

# Kolejność jak na stronach listujących: najnowsze pierwsze
_LIST_SQL = "SELECT * FROM {table} ORDER BY created_at DESC"
_GET_SQL = "SELECT * FROM {table} WHERE id::text = $1"

_TABLES: dict[EntityType, str] = {
    EntityType.PROCEDURE: "procedures",
    EntityType.SYSTEM: "systems",
    EntityType.SCRIPT: "conversation_scripts",
    EntityType.ARTICLE: "knowledge_articles",
}


def _row_to_dict(row: asyncpg.Record) -> dict[str, Any]:
    data = dict(row)
    # UUID-y z bazy → str (kontrakty trzymają id jako tekst)
    for key in ("id", "created_by"):
        if data.get(key) is not None:
            data[key] = str(data[key])
    return data


class PostgresEntityStore:
    """Implementacja EntityStore na PostgreSQL + asyncpg."""

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    # ──────────────────────── Lifecycle ──────────────────────────────────

    @classmethod
    async def create(cls, dsn: str) -> "PostgresEntityStore":
        """Factory: tworzy pool połączeń."""
        pool = await asyncpg.create_pool(dsn, min_size=1, max_size=5)
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()

    async def ping(self) -> None:
        await self._pool.fetchval("SELECT 1")

    # ──────────────────────── Pule ───────────────────────────────────────

    async def list_procedures(self) -> list[Procedure]:
        return await self._list(_TABLES[EntityType.PROCEDURE], Procedure)

    async def list_systems(self) -> list[System]:
        return await self._list(_TABLES[EntityType.SYSTEM], System)

    async def list_scripts(self) -> list[ConversationScript]:
        return await self._list(_TABLES[EntityType.SCRIPT], ConversationScript)

    async def list_articles(self) -> list[KnowledgeArticle]:
        return await self._list(_TABLES[EntityType.ARTICLE], KnowledgeArticle)

    async def get_entity(self, entity_type: EntityType, entity_id: str) -> Entity:
        """Zwraca rekord po ID. Rzuca KeyError jeśli nie istnieje."""
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(_GET_SQL.format(table=_TABLES[entity_type]), entity_id)
        if row is None:
            raise KeyError(f"Encja nie istnieje: {entity_type.value} {entity_id!r}")
        return ENTITY_MODELS[entity_type].model_validate(_row_to_dict(row))

    async def _list(self, table: str, model: type[M]) -> list[M]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(_LIST_SQL.format(table=table))
        return [model.model_validate(_row_to_dict(r)) for r in rows]
