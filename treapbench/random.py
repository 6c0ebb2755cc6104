import numpy as np

KEY_MAX = 10_000_000
DEFAULT_BLOCK_SIZE = 4096


class PrioritySource:
    """Uniform integers over [0, high], drawn from numpy in blocks.

    The same distribution serves as workload keys and as treap priorities.
    """

    def __init__(self, seed=None, high: int = KEY_MAX, block_size: int = DEFAULT_BLOCK_SIZE):
        if high < 0:
            raise ValueError("high must be non-negative")
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.high = high
        self.block_size = block_size
        self.rng = np.random.default_rng(seed)
        self._block = []
        self._pos = 0

    def _refill(self):
        # tolist() hands back plain ints so callers never compare numpy scalars
        self._block = self.rng.integers(0, self.high, size=self.block_size, endpoint=True, dtype=np.uint64).tolist()
        self._pos = 0

    def draw(self) -> int:
        if self._pos >= len(self._block):
            self._refill()
        value = self._block[self._pos]
        self._pos += 1
        return value

    def __call__(self) -> int:
        return self.draw()


_default_source = PrioritySource()


def random_key() -> int:
    return _default_source.draw()


def seed(value=None):
    """Reseed the shared source used by random_key() and by treaps built without one."""
    global _default_source
    _default_source = PrioritySource(value)


def default_source() -> PrioritySource:
    return _default_source
