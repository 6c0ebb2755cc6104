from typing import List, NamedTuple, Optional, Union

import numpy as np

from .element import Element
from .random import PrioritySource, default_source


class Insertion(NamedTuple):
    element: Element


class Deletion(NamedTuple):
    key: int


class Search(NamedTuple):
    key: int


Action = Union[Insertion, Deletion, Search]


class WorkloadGenerator:
    """Produces insert/delete/search actions over uniformly random keys.

    Ids start at 1 and grow by one per generated element. The key of every
    generated element is remembered until a deletion consumes it, so most
    deletions hit a live key.
    """

    def __init__(self, source: PrioritySource = None, rng=None):
        self.source = source if source is not None else default_source()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.next_id = 1
        self.generated: List[Optional[int]] = []

    def gen_key(self) -> int:
        return self.source.draw()

    def gen_element(self) -> Element:
        e = Element(self.next_id, self.gen_key())
        self.next_id += 1
        self.generated.append(e.key)
        return e

    def gen_insertion(self) -> Insertion:
        return Insertion(self.gen_element())

    def gen_deletion(self) -> Deletion:
        if self.next_id == 1:
            raise ValueError("Cannot generate a deletion before any element was generated")
        id = int(self.rng.integers(1, self.next_id))
        k = self.generated[id - 1]
        if k is None:
            # Already deleted: fall back to a key that is most likely absent
            return Deletion(self.gen_key())
        self.generated[id - 1] = None
        return Deletion(k)

    def gen_search(self) -> Search:
        return Search(self.gen_key())

    def mixed(self, n: int, p_delete: float = 0.0, p_search: float = 0.0) -> List[Action]:
        """`n` actions; each a deletion w.p. p_delete, a search w.p. p_search, else an insertion."""
        if p_delete < 0 or p_search < 0 or p_delete + p_search > 1:
            raise ValueError("p_delete and p_search must be non-negative and sum to at most 1")
        actions = []
        for u in self.rng.random(n):
            if u < p_delete and self.next_id > 1:
                actions.append(self.gen_deletion())
            elif p_delete <= u < p_delete + p_search:
                actions.append(self.gen_search())
            else:
                actions.append(self.gen_insertion())
        return actions


def apply(structure, action: Action):
    """Run one action against anything exposing insert/delete/search."""
    if isinstance(action, Insertion):
        return structure.insert(action.element)
    if isinstance(action, Deletion):
        return structure.delete(action.key)
    if isinstance(action, Search):
        return structure.search(action.key)
    raise TypeError(f"Unknown action {action!r}")


def run(structure, actions: List[Action]):
    for action in actions:
        apply(structure, action)
    return structure
