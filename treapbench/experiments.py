import logging
import time
from typing import Callable, List, NamedTuple

import numpy as np

from .element import Element
from .random import PrioritySource
from .structures import DynamicArray, Treap
from .workload import WorkloadGenerator, run

logger = logging.getLogger(__name__)

INSERTION_SIZES = [100_000, 200_000, 500_000, 800_000, 1_000_000]
OPERATION_PROBABILITIES = [0.001, 0.005, 0.01, 0.05, 0.1]
WORKLOAD_SIZE = 1_000_000


class TimingResult(NamedTuple):
    label: str
    treap_seconds: float
    array_seconds: float


def timed(fn: Callable, *args) -> float:
    start = time.perf_counter()
    fn(*args)
    return time.perf_counter() - start


def _generator(seed):
    # Keys, priorities and action choices come from independent streams
    key_seed, priority_seed, action_seed = np.random.SeedSequence(seed).spawn(3)
    return WorkloadGenerator(PrioritySource(key_seed), rng=np.random.default_rng(action_seed)), priority_seed


def compare(label: str, actions, priority_seed=None) -> TimingResult:
    """Replay the same actions on a fresh treap and a fresh dynamic array."""
    treap_seconds = timed(run, Treap(PrioritySource(priority_seed)), actions)
    array_seconds = timed(run, DynamicArray(), actions)
    logger.info(f"{label}: treap {treap_seconds:.3f}s, dynamic array {array_seconds:.3f}s")
    return TimingResult(label, treap_seconds, array_seconds)


def experiment_depth(trials: int = 100, n: int = 1024, seed=None) -> List[float]:
    """Average node depth of a treap built from (i, i) for i in 1..n, once per trial."""
    averages = []
    for trial_seed in np.random.SeedSequence(seed).spawn(trials):
        treap = Treap(PrioritySource(trial_seed))
        for i in range(1, n + 1):
            treap.insert(Element(i, i))
        averages.append(treap.average_depth())
    logger.info(f"Average depth over {trials} treaps of {n} nodes: {np.mean(averages):.2f} (2 ln n = {2 * np.log(n):.2f})")
    return averages


def experiment_insertions(sizes=INSERTION_SIZES, seed=None) -> List[TimingResult]:
    generator, priority_seed = _generator(seed)
    return [compare(f"{n} insertions", generator.mixed(n), priority_seed) for n in sizes]


def experiment_deletions(probabilities=OPERATION_PROBABILITIES, n: int = WORKLOAD_SIZE, seed=None) -> List[TimingResult]:
    generator, priority_seed = _generator(seed)
    return [
        compare(f"{p * 100:g}% deletions", generator.mixed(n, p_delete=p), priority_seed)
        for p in probabilities
    ]


def experiment_searches(probabilities=OPERATION_PROBABILITIES, n: int = WORKLOAD_SIZE, seed=None) -> List[TimingResult]:
    generator, priority_seed = _generator(seed)
    return [
        compare(f"{p * 100:g}% searches", generator.mixed(n, p_search=p), priority_seed)
        for p in probabilities
    ]


def experiment_mixed(sizes=INSERTION_SIZES, seed=None) -> List[TimingResult]:
    generator, priority_seed = _generator(seed)
    return [
        compare(f"{n} ops with 5% deletion & 5% search", generator.mixed(n, p_delete=0.05, p_search=0.05), priority_seed)
        for n in sizes
    ]
