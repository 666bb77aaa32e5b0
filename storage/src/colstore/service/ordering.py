"""Reordering for any project-scoped collection of ranked items.

A collection is reached through an :class:`OrderingBackend`, which lists the
items with their current rank and persists one rank at a time. Ranks carry no
meaning beyond relative position: listings always re-derive the sequence from
whatever ``order`` values exist, sorted by ``(order, tiebreak)``. A reorder
that only partly persisted therefore reads back as a consistent, if slightly
different, ranking and is not treated as an error.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, List, Optional

from loguru import logger


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


@dataclass
class OrderedItem:
    key: Hashable
    order: int
    tiebreak: str = ""


@dataclass
class ReorderResult:
    order: List[Hashable] = field(default_factory=list)
    changed: List[Hashable] = field(default_factory=list)
    failed: List[Hashable] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failed


class OrderingBackend(ABC):
    @abstractmethod
    def list_items(self, collection_id: str) -> List[OrderedItem]:
        pass

    @abstractmethod
    def set_order(self, collection_id: str, key: Hashable, order: int) -> None:
        pass


def ranked(items: List[OrderedItem]) -> List[OrderedItem]:
    return sorted(items, key=lambda i: (i.order, i.tiebreak))


def _persist(backend: OrderingBackend, collection_id: str, updates: List[OrderedItem], result: ReorderResult) -> None:
    for item in updates:
        try:
            backend.set_order(collection_id, item.key, item.order)
        except Exception as e:
            # Left unretried; the next read ranks whatever was written
            logger.warning("Failed to persist order={} for {} in {}: {}", item.order, item.key, collection_id, e)
            result.failed.append(item.key)
        else:
            result.changed.append(item.key)


def reorder(backend: OrderingBackend, collection_id: str, moved_key: Hashable, target_key: Hashable) -> Optional[ReorderResult]:
    """Move ``moved_key`` into the slot ``target_key`` occupied and renumber from 1.

    Moving an item down lands it just after the target, moving it up lands it
    just before. Returns ``None`` when either key is not in the collection.
    """
    items = ranked(backend.list_items(collection_id))
    keys = [i.key for i in items]
    if moved_key not in keys or target_key not in keys:
        return None
    if moved_key == target_key:
        return ReorderResult(order=keys)

    target_index = keys.index(target_key)
    sequence = list(items)
    moved = sequence.pop(keys.index(moved_key))
    sequence.insert(target_index, moved)

    updates = [
        OrderedItem(key=item.key, order=index, tiebreak=item.tiebreak)
        for index, item in enumerate(sequence, start=1)
        if item.order != index
    ]
    result = ReorderResult(order=[i.key for i in sequence])
    _persist(backend, collection_id, updates, result)
    logger.debug("Reordered {} in {}: {} written, {} failed", moved_key, collection_id, len(result.changed), len(result.failed))
    return result


def move_adjacent(backend: OrderingBackend, collection_id: str, key: Hashable, direction: Direction) -> Optional[ReorderResult]:
    """Swap an item with its neighbour; a no-op at either end."""
    items = ranked(backend.list_items(collection_id))
    keys = [i.key for i in items]
    if key not in keys:
        return None
    index = keys.index(key)
    other = index - 1 if Direction(direction) is Direction.UP else index + 1
    if other < 0 or other >= len(items):
        return ReorderResult(order=keys)

    current, neighbour = items[index], items[other]
    sequence = list(items)
    sequence[index], sequence[other] = neighbour, current
    result = ReorderResult(order=[i.key for i in sequence])

    if current.order != neighbour.order:
        updates = [
            OrderedItem(key=current.key, order=neighbour.order, tiebreak=current.tiebreak),
            OrderedItem(key=neighbour.key, order=current.order, tiebreak=neighbour.tiebreak),
        ]
    else:
        # Equal ranks would swap to the same values, renumber instead
        updates = [
            OrderedItem(key=item.key, order=position, tiebreak=item.tiebreak)
            for position, item in enumerate(sequence, start=1)
            if item.order != position
        ]
    _persist(backend, collection_id, updates, result)
    return result

