"""
InMemoryEntityStore — implementacja portu EntityStore w pamięci.
Używana w testach i przy KB_CROSSREF_ENTITY_BACKEND=memory.
"""
from __future__ import annotations

from contracts import (
    ENTITY_MODELS,
    ConversationScript,
    Entity,
    EntityType,
    KnowledgeArticle,
    Procedure,
    System,
)


class InMemoryEntityStore:
    """
    Trzyma cztery pule; nowo dodane encje trafiają na początek listy
    (kolejność "najnowsze pierwsze", jak created_at DESC w bazie).
    """

    def __init__(self) -> None:
        self._pools: dict[type, list[Entity]] = {
            Procedure: [],
            System: [],
            ConversationScript: [],
            KnowledgeArticle: [],
        }

    def add(self, entity: Entity) -> None:
        try:
            pool = self._pools[type(entity)]
        except KeyError:
            raise TypeError(f"Nieobsługiwany typ encji: {type(entity).__name__}")
        pool.insert(0, entity)

    async def get_entity(self, entity_type: EntityType, entity_id: str) -> Entity:
        for entity in self._pools[ENTITY_MODELS[entity_type]]:
            if entity.id == entity_id:
                return entity
        raise KeyError(f"Encja nie istnieje: {entity_type.value} {entity_id!r}")

    async def list_procedures(self) -> list[Procedure]:
        return list(self._pools[Procedure])

    async def list_systems(self) -> list[System]:
        return list(self._pools[System])

    async def list_scripts(self) -> list[ConversationScript]:
        return list(self._pools[ConversationScript])

    async def list_articles(self) -> list[KnowledgeArticle]:
        return list(self._pools[KnowledgeArticle])

    async def close(self) -> None:
        return None
