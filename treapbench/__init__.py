from .element import Element, make_element
from .exceptions import InvariantViolation
from .random import PrioritySource, KEY_MAX, random_key
from .structures import Treap, DynamicArray
