from typing import NamedTuple

ID_MAX = 2**64 - 1
KEY_MAX_U32 = 2**32 - 1


class Element(NamedTuple):
    id: int
    key: int


def make_element(id: int, key: int) -> Element:
    if not 0 <= id <= ID_MAX:
        raise ValueError(f"Element id {id} does not fit in an unsigned 64-bit integer")
    if not 0 <= key <= KEY_MAX_U32:
        raise ValueError(f"Element key {key} does not fit in an unsigned 32-bit integer")
    return Element(int(id), int(key))
