"""
Port: EntityStore
Odpowiedzialność: dostarczanie czterech pul encji (procedury, systemy, skrypty, artykuły).
Zapis/edycja należą do zarządzanej bazy, ten port jest tylko do odczytu.
"""
from typing import Protocol, Union, runtime_checkable

from contracts import ConversationScript, EntityType, KnowledgeArticle, Procedure, System


@runtime_checkable
class EntityStore(Protocol):
    async def list_procedures(self) -> list[Procedure]:
        """Returns procedures, newest first."""
        ...

    async def list_systems(self) -> list[System]:
        """Returns systems, newest first."""
        ...

    async def list_scripts(self) -> list[ConversationScript]:
        """Returns conversation scripts, newest first."""
        ...

    async def list_articles(self) -> list[KnowledgeArticle]:
        """Returns knowledge articles, newest first."""
        ...

    async def get_entity(
        self, entity_type: EntityType, entity_id: str
    ) -> Union[Procedure, System, ConversationScript, KnowledgeArticle]:
        """Returns one record of the given variant. Raises KeyError if not found."""
        ...
