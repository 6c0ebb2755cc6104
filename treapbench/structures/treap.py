from typing import List, Optional

from ..element import Element, KEY_MAX_U32
from ..exceptions import InvariantViolation
from ..random import PrioritySource, default_source

# Above every drawn priority, so a node carrying it loses every heap comparison.
PRIORITY_SENTINEL = KEY_MAX_U32


class Node:
    __slots__ = ("x", "priority", "left", "right")

    def __init__(self, x: Element, priority: int):
        self.x = x
        self.priority = priority
        self.left: Optional["Node"] = None
        self.right: Optional["Node"] = None

    @property
    def rank(self):
        # Priority ties are broken by (key, id) so the heap order is total.
        return (self.priority, self.x.key, self.x.id)

    @property
    def order(self):
        return (self.x.key, self.x.id)

    def __repr__(self):
        return f"Node({self.x}, priority={self.priority})"


def rotate_right(root: Node) -> Node:
    """Promote the left child of `root` and return it as the new subtree root."""
    pivot = root.left
    root.left = pivot.right
    pivot.right = root
    return pivot


def rotate_left(root: Node) -> Node:
    """Promote the right child of `root` and return it as the new subtree root."""
    pivot = root.right
    root.right = pivot.left
    pivot.left = root
    return pivot


def _smaller_child(node: Node) -> Optional[Node]:
    left, right = node.left, node.right
    if left is None:
        return right
    if right is None:
        return left
    return left if left.rank < right.rank else right


def repair(node: Node) -> Node:
    """Single local heap-repair step.

    If a child outranks `node` (smaller rank), rotate that child above it.
    When both children do, the one with the smaller rank is promoted.
    Returns the root of the repaired subtree.
    """
    child = _smaller_child(node)
    if child is None or not child.rank < node.rank:
        return node
    if child is node.left:
        return rotate_right(node)
    return rotate_left(node)


class Treap:
    """Randomized BST over (key, id), min-heap ordered on (priority, key, id).

    Nodes with smaller priority sit nearer the root. `delete` demotes the
    target to the sentinel priority and rotates it down to a leaf.
    """

    def __init__(self, priorities: PrioritySource = None):
        self.priorities = priorities if priorities is not None else default_source()
        if self.priorities.high >= PRIORITY_SENTINEL:
            raise ValueError(f"Priorities must stay below the deletion sentinel {PRIORITY_SENTINEL}")
        self.root: Optional[Node] = None
        self.size = 0

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"Treap(size={self.size})"

    def _insert(self, node: Optional[Node], x: Element) -> Node:
        if node is None:
            return Node(x, self.priorities.draw())
        if (x.key, x.id) < node.order:
            node.left = self._insert(node.left, x)
        else:
            node.right = self._insert(node.right, x)
        return repair(node)

    def insert(self, x: Element):
        self.root = self._insert(self.root, Element(*x))
        self.size += 1

    def delete(self, k: int):
        parent, target = None, self.root
        while target is not None and target.x.key != k:
            parent = target
            target = target.left if k < target.x.key else target.right
        if target is None:
            return

        target.priority = PRIORITY_SENTINEL
        while target.left is not None or target.right is not None:
            # repair() on the sentinel node always promotes a child
            subtree = repair(target)
            self._replace_child(parent, target, subtree)
            parent = subtree
        self._replace_child(parent, target, None)
        self.size -= 1

    def _replace_child(self, parent: Optional[Node], old: Node, new: Optional[Node]):
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def search(self, k: int) -> Optional[Element]:
        node = self.root
        while node is not None:
            if k < node.x.key:
                node = node.left
            elif k > node.x.key:
                node = node.right
            else:
                return node.x
        return None

    # Diagnostics

    def all_depths(self) -> List[int]:
        """Depth of every node in pre-order, root at depth 0."""
        depths = []
        stack = [(self.root, 0)] if self.root is not None else []
        while stack:
            node, depth = stack.pop()
            depths.append(depth)
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))
        return depths

    def depth_of(self, k: int) -> Optional[int]:
        node, depth = self.root, 0
        while node is not None:
            if k < node.x.key:
                node = node.left
            elif k > node.x.key:
                node = node.right
            else:
                return depth
            depth += 1
        return None

    def average_depth(self) -> float:
        depths = self.all_depths()
        if not depths:
            return 0.0
        return sum(depths) / len(depths)

    def height(self) -> int:
        depths = self.all_depths()
        return max(depths) + 1 if depths else 0

    def check_invariants(self):
        """Raise InvariantViolation if the BST or heap order is broken anywhere."""
        count = 0
        # Each entry carries the exclusive (key, id) bounds inherited from ancestors.
        stack = [(self.root, None, None)] if self.root is not None else []
        while stack:
            node, low, high = stack.pop()
            count += 1
            if low is not None and not low < node.order:
                raise InvariantViolation(f"BST order broken at {node}: not after {low}", node.x.key)
            if high is not None and not node.order < high:
                raise InvariantViolation(f"BST order broken at {node}: not before {high}", node.x.key)
            for child in (node.left, node.right):
                if child is not None and child.rank < node.rank:
                    raise InvariantViolation(f"Heap order broken: {child} outranks parent {node}", child.x.key)
            if node.left is not None:
                stack.append((node.left, low, node.order))
            if node.right is not None:
                stack.append((node.right, node.order, high))
        if count != self.size:
            raise InvariantViolation(f"Size mismatch: counted {count} nodes, tracked {self.size}")

    def validate(self) -> bool:
        try:
            self.check_invariants()
        except InvariantViolation:
            return False
        return True
