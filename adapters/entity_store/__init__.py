from .loader import load_gazetteer
from .memory_entity_store import InMemoryEntityStore
from .postgres_entity_store import PostgresEntityStore

__all__ = [
    "InMemoryEntityStore",
    "PostgresEntityStore",
    "load_gazetteer",
]
