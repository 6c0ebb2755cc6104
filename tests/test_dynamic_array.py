import pytest

from treapbench import DynamicArray, Element


def is_power_of_two_multiple(capacity, initial):
    ratio, rest = divmod(capacity, initial)
    return rest == 0 and ratio & (ratio - 1) == 0


def test_when_deleting_middle_key():
    array = DynamicArray()
    array.insert((1, 10))
    array.insert((2, 20))
    array.insert((3, 30))
    array.delete(20)
    assert array.search(20) is None
    assert array.search(10) == Element(1, 10)
    assert array.search(30) == Element(3, 30)
    assert array.search(999) is None
    assert len(array) == 2


def test_delete_absent_key_is_noop():
    array = DynamicArray()
    for id in range(1, 6):
        array.insert(Element(id, id * 10))
    array.delete(15)
    assert len(array) == 5
    assert array.capacity == 8


def test_capacity_doubles_when_full():
    array = DynamicArray()
    capacities = []
    for id in range(1, 18):
        array.insert(Element(id, id))
        capacities.append(array.capacity)
    assert capacities[:5] == [1, 2, 4, 4, 8]
    assert array.capacity == 32
    assert all(array.search(k) == Element(k, k) for k in range(1, 18))


def test_capacity_halves_under_quarter_occupancy():
    array = DynamicArray(initial_capacity=4)
    for id in range(1, 65):
        array.insert(Element(id, id))
    assert array.capacity == 64
    for k in range(1, 65):
        array.delete(k)
        assert array.capacity >= 4
        assert len(array) <= array.capacity
        assert is_power_of_two_multiple(array.capacity, 4)
        if array.capacity > 4:
            assert len(array) * 4 >= array.capacity
    assert len(array) == 0
    assert array.capacity == 4


def test_grow_shrink_cycles_keep_all_live_elements():
    array = DynamicArray(initial_capacity=2)
    live = set()
    id = 0
    for cycle in range(3):
        for _ in range(100):
            id += 1
            array.insert(Element(id, id))
            live.add(id)
        for k in sorted(live)[::2]:
            array.delete(k)
            live.discard(k)
        assert is_power_of_two_multiple(array.capacity, 2)
    assert len(array) == len(live)
    assert all(array.search(k) == Element(k, k) for k in live)


def test_duplicate_keys_delete_one_at_a_time():
    array = DynamicArray()
    array.insert(Element(1, 7))
    array.insert(Element(2, 7))
    array.delete(7)
    assert array.search(7).key == 7
    array.delete(7)
    assert array.search(7) is None


def test_holds_full_width_ids_and_keys():
    array = DynamicArray()
    array.insert(Element(2**64 - 1, 2**32 - 1))
    assert array.search(2**32 - 1) == Element(2**64 - 1, 2**32 - 1)


@pytest.mark.parametrize("capacity", [0, 3, -4, 12])
def test_initial_capacity_must_be_power_of_two(capacity):
    with pytest.raises(ValueError):
        DynamicArray(initial_capacity=capacity)
