import logging
from typing import Optional

import numpy as np

from ..element import Element

logger = logging.getLogger(__name__)


class DynamicArray:
    """Unordered element buffer backed by fixed-size numpy arrays.

    Capacity doubles when full and halves once occupancy drops under a
    quarter, never going below `initial_capacity`.
    """

    def __init__(self, initial_capacity: int = 1):
        if initial_capacity <= 0 or (initial_capacity & (initial_capacity - 1)) != 0:
            raise ValueError("initial_capacity must be a positive power of two")
        self.initial_capacity = initial_capacity
        self.size = 0
        self.ids = np.zeros(initial_capacity, dtype=np.uint64)
        self.keys = np.zeros(initial_capacity, dtype=np.uint32)

    @property
    def capacity(self) -> int:
        return len(self.keys)

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"DynamicArray(size={self.size}, capacity={self.capacity})"

    def _resize(self, new_capacity: int):
        assert new_capacity >= self.size
        logger.debug(f"Resizing dynamic array from {self.capacity} to {new_capacity} slots ({self.size} used)")
        ids = np.zeros(new_capacity, dtype=np.uint64)
        keys = np.zeros(new_capacity, dtype=np.uint32)
        ids[:self.size] = self.ids[:self.size]
        keys[:self.size] = self.keys[:self.size]
        self.ids, self.keys = ids, keys

    def insert(self, x: Element):
        if self.size == self.capacity:
            self._resize(self.capacity * 2)
        self.ids[self.size] = x[0]
        self.keys[self.size] = x[1]
        self.size += 1

    def _find(self, k: int) -> int:
        # Vectorised, but still a linear scan over the live prefix
        hits = np.flatnonzero(self.keys[:self.size] == k)
        return int(hits[0]) if len(hits) else -1

    def delete(self, k: int):
        i = self._find(k)
        if i < 0:
            return
        last = self.size - 1
        self.ids[i], self.ids[last] = self.ids[last], self.ids[i]
        self.keys[i], self.keys[last] = self.keys[last], self.keys[i]
        self.size -= 1
        if self.size * 4 < self.capacity and self.capacity > self.initial_capacity:
            self._resize(self.capacity // 2)

    def search(self, k: int) -> Optional[Element]:
        i = self._find(k)
        if i < 0:
            return None
        return Element(int(self.ids[i]), int(self.keys[i]))
