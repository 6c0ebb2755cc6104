import pytest

from treapbench import PrioritySource, Treap


@pytest.fixture()
def source():
    return PrioritySource(seed=1234)


@pytest.fixture()
def treap(source):
    return Treap(source)
