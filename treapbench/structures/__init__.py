from .treap import Treap, Node, rotate_left, rotate_right, PRIORITY_SENTINEL
from .dynamic_array import DynamicArray
