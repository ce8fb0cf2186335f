from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

C = TypeVar("C")


class World:
    """
    Minimal entity/component store.

    Entities are integer ids; each component type has its own store keyed by
    entity. Systems query with `join(*types)` and receive the shared GridMap
    as an explicit argument rather than through the world.
    """

    def __init__(self) -> None:
        self._next_id = 1
        self._entities: List[int] = []
        self._stores: Dict[type, Dict[int, Any]] = {}

    def create_entity(self, *components: Any) -> int:
        entity = self._next_id
        self._next_id += 1
        self._entities.append(entity)
        for component in components:
            self.add_component(entity, component)
        logger.debug("Created entity %d with %s", entity, [type(c).__name__ for c in components])
        return entity

    def delete_entity(self, entity: int) -> None:
        if entity not in self._entities:
            raise KeyError(f"Unknown entity {entity}")
        self._entities.remove(entity)
        for store in self._stores.values():
            store.pop(entity, None)

    @property
    def entities(self) -> Tuple[int, ...]:
        return tuple(self._entities)

    def add_component(self, entity: int, component: Any) -> None:
        if entity not in self._entities:
            raise KeyError(f"Unknown entity {entity}")
        self._stores.setdefault(type(component), {})[entity] = component

    def remove_component(self, entity: int, ctype: Type[C]) -> Optional[C]:
        return self._stores.get(ctype, {}).pop(entity, None)

    def get_component(self, entity: int, ctype: Type[C]) -> Optional[C]:
        return self._stores.get(ctype, {}).get(entity)

    def has_component(self, entity: int, ctype: type) -> bool:
        return entity in self._stores.get(ctype, {})

    def join(self, *ctypes: type) -> Iterator[Tuple[Any, ...]]:
        """Yield (entity, c1, c2, ...) for every entity that has all the given component types."""
        if not ctypes:
            return
        stores = [self._stores.get(t, {}) for t in ctypes]
        for entity in list(self._entities):
            if all(entity in store for store in stores):
                yield (entity, *(store[entity] for store in stores))
