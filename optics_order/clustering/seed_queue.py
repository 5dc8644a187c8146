"""Seed queue: the ascending-priority frontier used during expansion.

The expansion engine only relies on the :class:`SeedQueue` contract:

- ``insert(item, priority)`` adds *item* at an ascending priority key.
- ``remove(item)`` drops *item* wherever it sits in the queue.
- ``get_elements()`` returns the current contents in ascending priority
  without draining the queue, reflecting every insert/remove made so far.

:class:`SortedSeedQueue` is the default implementation.  Equal priorities
keep insertion order, which makes a run deterministic.
"""

from __future__ import annotations

import bisect
import itertools
from abc import ABC, abstractmethod
from typing import Callable, Dict, Hashable, List, Tuple


class SeedQueue(ABC):
    """Abstract ascending priority queue over hashable items."""

    @abstractmethod
    def insert(self, item: Hashable, priority: float) -> None:
        ...

    @abstractmethod
    def remove(self, item: Hashable) -> None:
        ...

    @abstractmethod
    def get_elements(self) -> List[Hashable]:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def __contains__(self, item: object) -> bool:
        ...


QueueFactory = Callable[[], SeedQueue]


class SortedSeedQueue(SeedQueue):
    """Seed queue backed by a list kept sorted on ``(priority, sequence)``.

    ``sequence`` is a per-queue insertion counter, so among equal priorities
    the earlier insert comes out first.  Inserting an item that is already
    queued replaces its entry.
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[float, int, Hashable]] = []
        self._keys: Dict[Hashable, Tuple[float, int]] = {}
        self._counter = itertools.count()

    def insert(self, item: Hashable, priority: float) -> None:
        if item in self._keys:
            self.remove(item)
        key = (float(priority), next(self._counter))
        bisect.insort(self._entries, (key[0], key[1], item))
        self._keys[item] = key

    def remove(self, item: Hashable) -> None:
        key = self._keys.pop(item, None)
        if key is None:
            raise KeyError(f"Item {item!r} is not in the queue")
        # (priority, sequence) is unique, so bisect on it never compares items.
        idx = bisect.bisect_left(self._entries, key)
        del self._entries[idx]

    def get_elements(self) -> List[Hashable]:
        return [item for _, _, item in self._entries]

    def priority(self, item: Hashable) -> float:
        """Current priority of a queued *item*."""
        return self._keys[item][0]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._keys
