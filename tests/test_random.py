import pytest

from treapbench import KEY_MAX, PrioritySource, make_element
from treapbench import random as treap_random


def test_draws_stay_in_range():
    source = PrioritySource(seed=1, high=10, block_size=16)
    values = [source.draw() for _ in range(1000)]
    assert min(values) >= 0
    assert max(values) <= 10
    assert set(values) == set(range(11))


def test_same_seed_same_sequence_across_blocks():
    a = PrioritySource(seed=42, block_size=8)
    b = PrioritySource(seed=42, block_size=8)
    assert [a() for _ in range(50)] == [b() for _ in range(50)]


def test_draws_are_plain_ints():
    assert type(PrioritySource(seed=0).draw()) is int


def test_default_key_range():
    source = PrioritySource(seed=3)
    assert source.high == KEY_MAX == 10_000_000
    assert all(0 <= source.draw() <= KEY_MAX for _ in range(10_000))


def test_seed_resets_shared_source():
    treap_random.seed(9)
    first = [treap_random.random_key() for _ in range(5)]
    treap_random.seed(9)
    assert [treap_random.random_key() for _ in range(5)] == first


@pytest.mark.parametrize("kwargs", [{"high": -1}, {"block_size": 0}])
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        PrioritySource(**kwargs)


def test_make_element_checks_ranges():
    assert make_element(1, 5) == (1, 5)
    with pytest.raises(ValueError):
        make_element(-1, 5)
    with pytest.raises(ValueError):
        make_element(1, 2**32)
    with pytest.raises(ValueError):
        make_element(2**64, 1)
