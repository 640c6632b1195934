import asyncio

import pytest

from adapters.entity_store import InMemoryEntityStore, load_gazetteer
from contracts import ConversationScript, EntityType, KnowledgeArticle, Procedure, System


def _store() -> InMemoryEntityStore:
    store = InMemoryEntityStore()
    store.add(Procedure(id="p-old", title="Returns"))
    store.add(Procedure(id="p-new", title="Refunds"))
    store.add(System(id="s1", name="CRM"))
    store.add(ConversationScript(id="c1", title="Greeting"))
    store.add(KnowledgeArticle(id="a1", title="FAQ", category="faq"))
    return store


def test_in_memory_store_lists_newest_first():
    procedures = asyncio.run(_store().list_procedures())

    assert [p.id for p in procedures] == ["p-new", "p-old"]


def test_in_memory_store_rejects_unknown_types():
    with pytest.raises(TypeError):
        InMemoryEntityStore().add({"id": "x", "title": "y"})


def test_load_gazetteer_gathers_all_pools_in_order():
    gaz = asyncio.run(load_gazetteer(_store()))

    assert gaz.order == (EntityType.PROCEDURE, EntityType.SYSTEM, EntityType.SCRIPT, EntityType.ARTICLE)
    assert [e.entity_id for e in gaz.entries()] == ["p-new", "p-old", "s1", "c1", "a1"]


def test_load_gazetteer_honours_custom_order():
    gaz = asyncio.run(load_gazetteer(_store(), order=[EntityType.ARTICLE, EntityType.SYSTEM]))

    assert [e.entity_id for e in gaz.entries()] == ["a1", "s1"]


def test_stored_rows_ignore_extra_columns():
    proc = Procedure.model_validate({"id": "p1", "title": "A", "yacht_id": "ignored"})

    assert proc.title == "A"


def test_get_entity_by_variant_and_id():
    store = _store()

    system = asyncio.run(store.get_entity(EntityType.SYSTEM, "s1"))

    assert system.name == "CRM"


def test_get_entity_missing_id_raises_key_error():
    store = _store()

    with pytest.raises(KeyError):
        asyncio.run(store.get_entity(EntityType.ARTICLE, "s1"))
