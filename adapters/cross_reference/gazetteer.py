"""
Cross-reference — Gazetteer: migawka czterech pul znanych nazw.

Pule są jawną, uporządkowaną listą par (wariant, pula). Kolejność pul
i kolejność wpisów w puli wyznaczają, kto wygrywa przy konflikcie.
Migawka jest budowana przez wywołującego na każde przejście; nic nie jest cache'owane.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Optional

from contracts import (
    DEFAULT_POOL_ORDER,
    DEFAULT_QUALIFIERS,
    EntityType,
    GazetteerEntry,
    GazetteerPool,
)

from .patterns import build_pattern

logger = logging.getLogger("kb_crossref.gazetteer")


def _field(entity: Any, name: str) -> Any:
    if isinstance(entity, Mapping):
        return entity.get(name)
    return getattr(entity, name, None)


def to_entry(entity: Any, entity_type: EntityType) -> GazetteerEntry:
    """Zamienia rekord encji (model pydantic lub dict) na wpis gazetteera.

    System wystawia `name`, pozostałe warianty `title`.
    """
    title = _field(entity, "name" if entity_type is EntityType.SYSTEM else "title")
    if title is None:
        title = _field(entity, "title") or _field(entity, "name")
    return GazetteerEntry(
        entity_type=entity_type,
        entity_id=str(_field(entity, "id")),
        title=title or "",
    )


class Gazetteer:
    """
    Niezmienna (na czas jednego skanu) migawka pul encji.

    Użycie:
        gaz = Gazetteer.from_entities(procedures=[...], systems=[...])
        for entry, pattern in gaz.iter_patterns():
            ...
    """

    def __init__(
        self,
        pools: Sequence[GazetteerPool],
        qualifiers: Optional[Mapping[EntityType, str]] = None,
    ) -> None:
        seen: set[EntityType] = set()
        for pool in pools:
            if pool.entity_type in seen:
                raise ValueError(f"Wariant występuje dwukrotnie w kolejności pul: {pool.entity_type.value!r}")
            seen.add(pool.entity_type)

        self._pools: tuple[GazetteerPool, ...] = tuple(pools)
        self._qualifiers: dict[EntityType, str] = dict(
            DEFAULT_QUALIFIERS if qualifiers is None else qualifiers
        )

    @classmethod
    def from_entities(
        cls,
        procedures: Iterable[Any] = (),
        systems: Iterable[Any] = (),
        scripts: Iterable[Any] = (),
        articles: Iterable[Any] = (),
        order: Sequence[EntityType] = DEFAULT_POOL_ORDER,
        qualifiers: Optional[Mapping[EntityType, str]] = None,
    ) -> "Gazetteer":
        by_type = {
            EntityType.PROCEDURE: procedures,
            EntityType.SYSTEM: systems,
            EntityType.SCRIPT: scripts,
            EntityType.ARTICLE: articles,
        }
        pools = []
        for entity_type in order:
            entity_type = EntityType(entity_type)
            pools.append(GazetteerPool(
                entity_type=entity_type,
                entries=[to_entry(e, entity_type) for e in by_type[entity_type]],
            ))
        return cls(pools, qualifiers=qualifiers)

    # ── odczyt ────────────────────────────────────────────────────────────────

    @property
    def pools(self) -> tuple[GazetteerPool, ...]:
        return self._pools

    @property
    def order(self) -> tuple[EntityType, ...]:
        return tuple(p.entity_type for p in self._pools)

    def qualifier(self, entity_type: EntityType) -> Optional[str]:
        return self._qualifiers.get(entity_type)

    def entries(self) -> Iterator[GazetteerEntry]:
        for pool in self._pools:
            yield from pool.entries

    def __len__(self) -> int:
        return sum(len(p.entries) for p in self._pools)

    def is_empty(self) -> bool:
        return len(self) == 0

    def without(self, entity_type: EntityType, entity_id: str) -> "Gazetteer":
        """Kopia migawki bez jednej encji (np. bez dokumentu, którego treść skanujemy)."""
        pools = [
            GazetteerPool(
                entity_type=pool.entity_type,
                entries=[
                    e for e in pool.entries
                    if not (e.entity_type == entity_type and e.entity_id == entity_id)
                ],
            )
            for pool in self._pools
        ]
        return Gazetteer(pools, qualifiers=self._qualifiers)

    def iter_patterns(self) -> Iterator[tuple[GazetteerEntry, re.Pattern[str]]]:
        """Zwraca (wpis, wzorzec) w kolejności pul, potem w kolejności wewnątrz puli.

        Wpisy z pustym tytułem są pomijane.
        """
        for entry in self.entries():
            pattern = build_pattern(entry.title, self.qualifier(entry.entity_type))
            if pattern is None:
                logger.debug("Pomijam %s %s: brak wzorca", entry.entity_type.value, entry.entity_id)
                continue
            yield entry, pattern
